"""Domain layer errors.

User-facing errors carry a display message in the product language
(Indonesian). Validation errors additionally carry a machine-readable code of
the form ``<ENTITY>.<REASON>``.
"""

NOT_CONTAIN_NEEDED_PROPERTY = "NOT_CONTAIN_NEEDED_PROPERTY"
NOT_MEET_DATA_TYPE_SPECIFICATION = "NOT_MEET_DATA_TYPE_SPECIFICATION"
METHOD_NOT_IMPLEMENTED = "METHOD_NOT_IMPLEMENTED"

ERROR_MESSAGES: dict[str, str] = {
    "NEW_THREAD.NOT_CONTAIN_NEEDED_PROPERTY": (
        "tidak dapat membuat thread baru karena properti yang dibutuhkan tidak ada"
    ),
    "NEW_THREAD.NOT_MEET_DATA_TYPE_SPECIFICATION": (
        "tidak dapat membuat thread baru karena tipe data tidak sesuai"
    ),
    "NEW_COMMENT.NOT_CONTAIN_NEEDED_PROPERTY": (
        "tidak dapat membuat komentar baru karena properti yang dibutuhkan tidak ada"
    ),
    "NEW_COMMENT.NOT_MEET_DATA_TYPE_SPECIFICATION": "komentar harus berupa string",
    "NEW_REPLY.NOT_CONTAIN_NEEDED_PROPERTY": (
        "tidak dapat membuat balasan baru karena properti yang dibutuhkan tidak ada"
    ),
    "NEW_REPLY.NOT_MEET_DATA_TYPE_SPECIFICATION": "balasan harus berupa string",
    "ADDED_THREAD.NOT_CONTAIN_NEEDED_PROPERTY": (
        "thread yang disimpan tidak memiliki properti yang dibutuhkan"
    ),
    "ADDED_THREAD.NOT_MEET_DATA_TYPE_SPECIFICATION": (
        "thread yang disimpan memiliki tipe data yang tidak sesuai"
    ),
    "ADDED_COMMENT.NOT_CONTAIN_NEEDED_PROPERTY": (
        "komentar yang disimpan tidak memiliki properti yang dibutuhkan"
    ),
    "ADDED_COMMENT.NOT_MEET_DATA_TYPE_SPECIFICATION": (
        "komentar yang disimpan memiliki tipe data yang tidak sesuai"
    ),
    "ADDED_REPLY.NOT_CONTAIN_NEEDED_PROPERTY": (
        "balasan yang disimpan tidak memiliki properti yang dibutuhkan"
    ),
    "ADDED_REPLY.NOT_MEET_DATA_TYPE_SPECIFICATION": (
        "balasan yang disimpan memiliki tipe data yang tidak sesuai"
    ),
}

NOT_FOUND_MESSAGES: dict[str, str] = {
    "thread": "thread tidak ditemukan",
    "comment": "komentar tidak ditemukan",
    "reply": "balasan tidak ditemukan",
}

FORBIDDEN_MESSAGE = "akses dilarang"


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error raised while constructing an entity."""

    reason: str = ""

    def __init__(self, entity: str):
        self.code = f"{entity}.{self.reason}"
        self.message = ERROR_MESSAGES.get(self.code, self.code)
        super().__init__(self.message)


class MissingPropertyError(ValidationError):
    """Raised when a payload lacks a required property."""

    reason = NOT_CONTAIN_NEEDED_PROPERTY


class DataTypeMismatchError(ValidationError):
    """Raised when a payload property has the wrong type."""

    reason = NOT_MEET_DATA_TYPE_SPECIFICATION


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class AuthorizationError(DomainError):
    """Raised when a user attempts to modify content they don't own."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        self.resource = resource
        self.resource_id = resource_id
        self.user_id = user_id
        self.message = FORBIDDEN_MESSAGE
        super().__init__(self.message)


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        self.message = NOT_FOUND_MESSAGES.get(resource, f"{resource} tidak ditemukan")
        super().__init__(self.message)


class MethodNotImplementedError(DomainError):
    """Raised when a repository contract method has no concrete implementation."""

    def __init__(self, repository: str):
        self.code = f"{repository}.{METHOD_NOT_IMPLEMENTED}"
        super().__init__(self.code)
