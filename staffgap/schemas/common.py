from pydantic import BaseModel


# ---------------------------------------------------------
# RESULT OF A FALLIBLE STORE OPERATION
# ---------------------------------------------------------
class OperationResult(BaseModel):
    success: bool
    message: str

    @classmethod
    def ok(cls, message: str) -> "OperationResult":
        return cls(success=True, message=message)

    @classmethod
    def fail(cls, message: str) -> "OperationResult":
        return cls(success=False, message=message)
