class AppException(Exception):
    """
    Lỗi nghiệp vụ, mang theo mã HTTP tương ứng để tầng API trả về.
    """
    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class BadRequestException(AppException):
    status_code = 400


class TargetAlreadyExistException(AppException):
    status_code = 409


class TargetNotExistException(AppException):
    status_code = 404
