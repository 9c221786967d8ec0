from datetime import datetime
import traceback


def format_local_time():
    """Current local time for log lines"""
    return datetime.now().astimezone().strftime("%Y-%m-%d %H:%M:%S %Z")


def log_message(tag: str, message: str):
    """Log a message with a source tag and time"""
    print(f"[{format_local_time()}] [{tag}] {message}")


def log_error(tag: str, message: str, error: Exception = None):
    """Log an error with a source tag and time"""
    error_msg = f"❌ {message}"
    if error:
        error_msg += f": {str(error)}"
    print(f"[{format_local_time()}] [{tag}] {error_msg}")
    if error:
        traceback.print_exception(type(error), error, error.__traceback__)
