class TemplateError(ValueError):
    """Base class for errors raised while building or rendering a template"""


class RenderError(TemplateError):
    """An entity could not be rendered, e.g. invalid raw JSON in a _meta field"""


class InvalidEntityError(TemplateError):
    """
    Raised by Entity.check: lists every missing or invalid field,
    so the caller can fix all problems in one go
    """

    def __init__(self, fields: list[str]):
        self.fields = fields
        super().__init__(f"missing required fields or invalid values: {fields}")
