import os
import time

from flask import current_app
from werkzeug.utils import secure_filename


def save_upload(image_file):
    """Write an uploaded image to the upload folder and return its public path.

    Files are named ``<epoch millis>-<original name>`` so concurrent uploads of
    the same photo rarely collide. Returns None when nothing was uploaded.
    """
    if not image_file or not image_file.filename:
        return None

    original_filename = secure_filename(image_file.filename) or 'upload'
    unique_filename = f"{int(time.time() * 1000)}-{original_filename}"
    destination = os.path.join(current_app.config['UPLOAD_FOLDER'], unique_filename)
    image_file.save(destination)
    current_app.logger.info("Saved upload %s", destination)

    return f"{current_app.config['UPLOAD_URL_PATH']}/{unique_filename}"


def upload_disk_path(image_path):
    filename = os.path.basename(image_path)
    return os.path.join(current_app.config['UPLOAD_FOLDER'], filename)


def remove_upload(image_path):
    """Delete a previously saved upload; failures are logged only."""
    if not image_path:
        return
    disk_path = upload_disk_path(image_path)
    try:
        if os.path.exists(disk_path):
            os.remove(disk_path)
            current_app.logger.info("Removed orphaned upload %s", disk_path)
    except OSError as e:
        current_app.logger.error(f"Failed to delete image file {disk_path}: {e}")
