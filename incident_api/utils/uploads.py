import logging
import os
import random
import time

from werkzeug.utils import secure_filename

logger = logging.getLogger(__name__)


def unique_filename(original_name):
    """Prefix a sanitized filename with a millisecond timestamp and a random suffix."""
    safe_name = secure_filename(original_name or '') or 'attachment'
    unique_suffix = f"{int(time.time() * 1000)}-{random.randint(0, 10**9)}"
    return f"{unique_suffix}-{safe_name}"


def save_attachment(file, upload_folder):
    """Store an uploaded file and return the reference recorded on the incident.

    Returns None when no file was sent.
    """
    if file is None or not file.filename:
        return None

    os.makedirs(upload_folder, exist_ok=True)
    filename = unique_filename(file.filename)
    file.save(os.path.join(upload_folder, filename))
    logger.info(f"Saved attachment {filename}")
    return filename


def remove_attachment(filename, upload_folder):
    """Delete a stored attachment, e.g. when the incident it belongs to was never saved."""
    if not filename:
        return
    try:
        os.remove(os.path.join(upload_folder, filename))
        logger.info(f"Removed attachment {filename}")
    except FileNotFoundError:
        logger.warning(f"Attachment {filename} was already missing")
