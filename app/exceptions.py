class AppError(Exception):
    def __init__(self, message: str, code: str = "INTERNAL_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class NotFoundError(AppError):
    def __init__(self, resource: str, resource_id: str):
        super().__init__(f"{resource} '{resource_id}' not found", code="NOT_FOUND")


class UnauthorizedError(AppError):
    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message, code="UNAUTHORIZED")


class UnknownDataTypeError(NotFoundError):
    def __init__(self, data_type: str):
        self.data_type = data_type
        super().__init__("Import data type", data_type)


class DecodeError(AppError):
    def __init__(self, message: str, code: str = "DECODE_ERROR"):
        super().__init__(message, code=code)


class UnsupportedFormatError(DecodeError):
    def __init__(self, extension: str):
        self.extension = extension
        super().__init__(
            f"Formato de arquivo não suportado: .{extension}. Use .json ou .csv",
            code="UNSUPPORTED_FORMAT",
        )


class InvalidFormatError(DecodeError):
    def __init__(self, message: str):
        super().__init__(message, code="INVALID_FORMAT")
