class PayReportError(Exception):
    """Base error for the payments report."""


class DuplicateKeyError(PayReportError):
    """A column, filter or condition key was registered twice on one entity."""


class UnknownTableError(PayReportError):
    pass


class UnknownColumnError(PayReportError):
    pass


class UnknownFilterError(PayReportError):
    pass


class UnsortableColumnError(PayReportError):
    pass


class UnsupportedOperatorError(PayReportError):
    """Operator is not offered by the filter (wrong kind or outside its limited set)."""


class InvalidConditionValueError(PayReportError):
    """A condition value could not be read as the number the filter expects."""


class EmptySelectionError(PayReportError):
    pass
