from src.dids.operations.parser import parse_operation, verify_operation_signature

__all__ = ["parse_operation", "verify_operation_signature"]
