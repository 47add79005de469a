from formkit.error import (
    BadRequestError,
    InternalServerError,
    NotFoundError,
    UnprocessableError,
)


class ElementValidationError(BadRequestError):
    errcode = "R00.400"


class TemplateNotFound(NotFoundError):
    errcode = "R00.404"


class RenderExecutionError(UnprocessableError):
    errcode = "R00.422"


class TemplateCompileError(InternalServerError):
    errcode = "R00.501"
