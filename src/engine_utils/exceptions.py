class CivicReportException(Exception):
    """Base Exception Class"""
    pass
class ReportIngestError(CivicReportException):
    """Error class for when a persisted row cannot be mapped onto a Report"""
    pass
class ConfigError(CivicReportException):
    """Config Error"""
    pass
