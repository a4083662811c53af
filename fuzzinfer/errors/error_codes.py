"""
Central registry of error codes for fuzzinfer.

Error codes follow the pattern: CATEGORY-ErrorName

Categories:
- CONFIG: Configuration loading and validation errors
- MF: Membership function construction errors
- SET: Fuzzy set construction errors
- RULE: Rule construction errors
- SCAN: Domain scan (quadrature) errors
- INFER: Inference and defuzzification errors

Usage:
    from fuzzinfer.errors.error_codes import ErrorCodes

    raise ConfigurationError(
        message="Unknown membership function type: sigmoid",
        error_code=ErrorCodes.MF_UNKNOWN_TYPE,
        ...
    )
"""


class ErrorCodes:
    """Central registry of error codes for consistent error handling."""

    # Configuration errors
    CONFIG_LOAD_FAILED = "CONFIG-LoadFailed"
    CONFIG_FILE_NOT_FOUND = "CONFIG-FileNotFound"
    CONFIG_INVALID_YAML = "CONFIG-InvalidYaml"
    CONFIG_VALIDATION_FAILED = "CONFIG-ValidationFailed"
    CONFIG_INVALID_PARAMETER_ORDER = "CONFIG-InvalidParameterOrder"
    CONFIG_INVALID_SIGMA = "CONFIG-InvalidSigma"
    CONFIG_INVALID_STEP = "CONFIG-InvalidStep"
    CONFIG_DUPLICATE_PRIORITY_LABEL = "CONFIG-DuplicatePriorityLabel"
    CONFIG_EMPTY_PRIORITY_SCALE = "CONFIG-EmptyPriorityScale"

    # Membership function errors
    MF_INVALID_PARAMETER_COUNT = "MF-InvalidParameterCount"
    MF_INVALID_PARAMETER_ORDER = "MF-InvalidParameterOrder"
    MF_INVALID_SIGMA = "MF-InvalidSigma"
    MF_UNKNOWN_TYPE = "MF-UnknownType"

    # Fuzzy set errors
    SET_INVALID_MEMBERSHIP_FUNCTION = "SET-InvalidMembershipFunction"

    # Rule errors
    RULE_INVALID_CONSEQUENCE = "RULE-InvalidConsequence"
    RULE_INVALID_CONDITION = "RULE-InvalidCondition"

    # Domain scan errors
    SCAN_INVALID_STEP = "SCAN-InvalidStep"

    # Inference errors
    INFER_INVALID_RULE = "INFER-InvalidRule"
    INFER_UNKNOWN_METHOD = "INFER-UnknownDefuzzificationMethod"
    INFER_UNSUPPORTED_INPUT = "INFER-UnsupportedBatchInput"
