from formkit import config, logger


DEBUG_APP_EXCEPTION = config.DEBUG_APP_EXCEPTION


class FormkitException(Exception):
    status_code = 500
    errcode = "A00.000"

    def __init__(self, errcode, message, details=None):
        super().__init__(message)
        self.message = message
        self.details = details
        self.errcode = errcode

        DEBUG_APP_EXCEPTION and logger.exception(message)

    def __str__(self):
        if self.details is None:
            return f"{self.errcode} [{self.status_code}] >> {self.message}"

        return f"{self.errcode} [{self.status_code}] >> {self.message} >> {self.details}"

    @property
    def content(self):
        if not self.details:
            return {"errcode": self.errcode, "message": self.message}

        return {"errcode": self.errcode, "message": self.message, "details": self.details}


class BadRequestError(FormkitException):
    status_code = 400
    errcode = "A00.400"


class NotFoundError(FormkitException):
    status_code = 404
    errcode = "A00.404"


class UnprocessableError(FormkitException):
    status_code = 422
    errcode = "A00.422"


class InternalServerError(FormkitException):
    status_code = 500
    errcode = "A00.500"
