from doctor_portal.models.user import User
from doctor_portal.models.service import Service
from doctor_portal.models.booking import Booking
from doctor_portal.models.doctor import Doctor

__all__ = ["User", "Service", "Booking", "Doctor"]
