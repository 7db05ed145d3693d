from .exceptions import (
    AlreadyBookedException,
    BusinessRuleViolationException,
    DomainException,
    DuplicateEmployeeException,
    DuplicateResourceException,
    DuplicateRoomException,
    EmployeeNotFoundException,
    GuestNotCheckedInException,
    NotBookedException,
    ResourceNotFoundException,
    RoomNotFoundException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "RoomNotFoundException",
    "EmployeeNotFoundException",
    "AlreadyBookedException",
    "NotBookedException",
    "GuestNotCheckedInException",
    "DuplicateRoomException",
    "DuplicateEmployeeException",
]
