from typing import Optional

# ======================================
# Errors
# ======================================

class CaramelError(Exception): pass

class ParseError(CaramelError):
    def __init__(self, message: str, position: Optional[int] = None, line: Optional[int] = None, column: Optional[int] = None):
        self.position = position
        self.line = line
        self.column = column
        if line is not None and column is not None:
            message = f"{message} (line {line}, column {column})"
        super().__init__(message)

class UnboundVariableError(CaramelError):
    def __init__(self, name: str):
        self.name = name
        super().__init__(f"undefined variable `{name}`")

class UnsupportedOperationError(CaramelError): pass

class ReductionLimitExceeded(CaramelError):
    def __init__(self, steps: int):
        self.steps = steps
        super().__init__(f"normalization did not finish within {steps} steps")
