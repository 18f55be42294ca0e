class EvAnalyticsError(Exception):
    """Base exception for all ev_analytics errors"""
    pass

class ConfigError(EvAnalyticsError):
    """Invalid or unreadable global.json or config directory"""
    pass

class DatasetLoadError(EvAnalyticsError):
    """
    The dataset could not be loaded. Terminal for the session:
    the app shows the message and does not retry.
    """
    pass

class FetchFailure(DatasetLoadError):
    """Dataset source unreachable: missing file, HTTP error, network error"""
    pass

class ParseFailure(DatasetLoadError):
    """
    CSV is malformed: parser error, empty input or
    required header columns missing
    """
    pass
