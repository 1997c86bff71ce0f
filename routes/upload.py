"""
Document upload route.

Stores the document in the FileStore, discovers its page count and records
both in the session. The order form reads them back when it previews
prices and when the order is submitted.
"""

from flask import (
    Blueprint,
    current_app,
    jsonify,
    request,
    session,
)
from werkzeug.datastructures import FileStorage
from werkzeug.utils import secure_filename

from core.exceptions import UnsupportedFileError
from logging_config import get_logger
from modules import page_ranges
from services.file_store import StoredFile


# Module logger
logger = get_logger(__name__)

upload_bp = Blueprint("upload", __name__)

# Constants
MAX_FILENAME_LENGTH = 255
UPLOAD_SESSION_KEY = "upload"


def current_upload() -> dict:
    """Session upload state: stored file paths and the page count."""
    return session.get(UPLOAD_SESSION_KEY) or {"paths": [], "pages": 0}


def clear_upload() -> None:
    session.pop(UPLOAD_SESSION_KEY, None)


def store_upload(upload: FileStorage) -> tuple[StoredFile, int]:
    """
    Save one uploaded document and record it in the session.

    The session page count follows the most recent PDF; Word documents
    are stored but do not change it.

    Returns:
        (stored file, pages in this document)

    Raises:
        UnsupportedFileError: If the document is not a PDF or Word file.
    """
    filename = secure_filename(upload.filename or "")
    if not filename or len(filename) > MAX_FILENAME_LENGTH:
        raise UnsupportedFileError(upload.filename or "", upload.mimetype or "")

    data = upload.read()
    file_store = current_app.config["FILE_STORE"]
    stored = file_store.save(filename, data, upload.mimetype or "")

    analyzer = current_app.config["PDF_ANALYZER"]
    analysis = analyzer.analyze(data, content_type=stored.type)
    pages = analysis.get("pages", 0)
    logger.info(f"Upload analyzed: {stored.name}, {pages} pages")

    state = current_upload()
    if stored.path not in state["paths"]:
        state["paths"].append(stored.path)
    if pages:
        state["pages"] = pages
    session[UPLOAD_SESSION_KEY] = state
    session.modified = True

    return stored, pages


@upload_bp.route("/upload", methods=["POST"])
def upload():
    """
    Handle an AJAX document upload.

    Returns JSON with the stored path and page count, plus the default
    page selection (``1-N``) the form fills in for a PDF.
    """
    document = request.files.get("file")
    if not document or document.filename == "":
        return jsonify({"error": "Please choose a file to upload."}), 400

    try:
        stored, pages = store_upload(document)
    except UnsupportedFileError as e:
        logger.warning(f"Upload rejected: {e}")
        return jsonify({"error": e.message}), 400

    state = current_upload()
    return jsonify({
        "name": stored.name,
        "path": stored.path,
        "size": stored.size,
        "pages": pages,
        "totalPages": state["pages"],
        "selectedPages": page_ranges.full_range(pages) if pages else page_ranges.ALL_PAGES,
    })
