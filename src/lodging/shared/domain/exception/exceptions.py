class DomainException(Exception):
    """ドメイン層で発生する基底例外

    error_kind はプレゼンテーション層が利用者に返す分類名。
    """

    error_kind = "DomainError"
    default_message = "A domain rule was violated"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ResourceNotFoundException(DomainException):
    """リソースが見つからない場合"""

    error_kind = "ResourceNotFound"
    default_message = "Resource not found"


class BusinessRuleViolationException(DomainException):
    """ビジネスルールに違反した場合"""

    error_kind = "BusinessRuleViolation"


class DuplicateResourceException(DomainException):
    """リソースの重複エラー"""

    error_kind = "DuplicateResource"
    default_message = "Resource already exists"


class RoomNotFoundException(ResourceNotFoundException):
    error_kind = "RoomNotFound"
    default_message = "Room not found!"


class EmployeeNotFoundException(ResourceNotFoundException):
    error_kind = "EmployeeNotFound"
    default_message = "Employee not found!"


class AlreadyBookedException(BusinessRuleViolationException):
    """予約済みの部屋を再度予約しようとした場合"""

    error_kind = "AlreadyBooked"
    default_message = "Room is already booked!"


class NotBookedException(BusinessRuleViolationException):
    """空室をチェックアウトしようとした場合"""

    error_kind = "NotBooked"
    default_message = (
        "Room is already available, can't checkout from an unoccupied room!"
    )


class GuestNotCheckedInException(BusinessRuleViolationException):
    """どの予約済み客室にも滞在していないゲストの注文"""

    error_kind = "GuestNotCheckedIn"
    default_message = (
        "Guest Id not found in any booked room. Unable to place food order."
    )


class DuplicateRoomException(DuplicateResourceException):
    error_kind = "DuplicateRoom"
    default_message = "Room number already exists!"


class DuplicateEmployeeException(DuplicateResourceException):
    error_kind = "DuplicateEmployee"
    default_message = "Employee ID already exists!"
