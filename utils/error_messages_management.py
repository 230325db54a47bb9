import logging
from datetime import datetime

# enabling logger
logger = logging.getLogger(__name__)
logger.setLevel(logging.INFO)
logger.propagate = True


# Error payloads
def generate_error_data(error_text, errors=None, detail=None, user_ip=None):
    current_time = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    data = {"status": "error", "error": error_text}
    if errors:
        data["errors"] = errors
    if detail:
        data["detail"] = detail

    logger.error(f"{current_time} - IP: {user_ip} - error: {error_text}" + (f" - {detail}" if detail else ""))
    return data


def field_error(field, message):
    return {"field": field, "message": message}
