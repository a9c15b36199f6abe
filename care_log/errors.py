"""异常类型。字段校验错误由 pydantic 的 ValidationError 表示。"""


class CareLogError(Exception):
    """所有业务错误的基类。"""


class SchedulingError(CareLogError):
    """预约校验失败：操作中止，菜单继续。"""


class NoPetsError(SchedulingError):
    def __init__(self) -> None:
        super().__init__("No pets registered. Please register a pet first.")


class PetNotFoundError(SchedulingError):
    def __init__(self, pet_id: str) -> None:
        self.pet_id = pet_id
        super().__init__(f"Pet with ID {pet_id} not found.")


class InvalidAppointmentTypeError(SchedulingError):
    def __init__(self, appointment_type: str, valid_types) -> None:
        self.appointment_type = appointment_type
        super().__init__(f"Invalid appointment type. Valid types: [{', '.join(valid_types)}]")


class PastAppointmentError(SchedulingError):
    def __init__(self) -> None:
        super().__init__("Appointment must be scheduled for a future date and time.")


class RecordFileError(CareLogError):
    """数据文件无法写入（或读取）。"""

    def __init__(self, path, cause: OSError) -> None:
        self.path = path
        self.cause = cause
        super().__init__(f"{path}: {cause.strerror or cause}")


class MalformedRecordError(CareLogError):
    """文件中某一行无法解析。"""

    def __init__(self, reason: str, line_no: int = 0) -> None:
        self.reason = reason
        self.line_no = line_no
        super().__init__(f"line {line_no}: {reason}" if line_no else reason)


def validation_message(error) -> str:
    """pydantic ValidationError 的第一条错误，转成一句话。"""
    first = error.errors()[0]
    loc = ".".join(str(p) for p in first.get("loc", ()))
    msg = first.get("msg", str(error))
    return f"{loc}: {msg}" if loc else msg
