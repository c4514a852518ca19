"""
Storage failures raised by repositories.

Adapters translate driver exceptions into these so that use cases never
inspect engine-specific error text.
"""


class UniqueViolation(Exception):
    """A named unique constraint rejected the write"""

    def __init__(self, constraint: str):
        self.constraint = constraint
        super().__init__(f"Unique constraint violated: {constraint}")


class PersistenceFailure(Exception):
    """Any other storage failure (foreign key, not-null, connection...)"""

    def __init__(self, detail: str):
        self.detail = detail
        super().__init__(detail)
