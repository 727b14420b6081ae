"""
api.routes_import - /api/v1/import endpoints.

Accepts the families and products CSVs as one multipart upload and
serves the failure reports an import produced.
"""

import logging
from pathlib import Path

from flask import request, jsonify, send_file

from api import api_bp
from import_engine import run_import, FailureReporter, CsvFormatError, ImportAbortedError

logger = logging.getLogger(__name__)


@api_bp.route("/import", methods=["POST"])
def api_import_csv():
    """
    POST /api/v1/import

    Multipart: file fields 'families' and 'products' (both required).
    """
    families = request.files.get("families")
    products = request.files.get("products")
    if not families:
        return jsonify({"success": False, "error": "no families file in upload"}), 400
    if not products:
        return jsonify({"success": False, "error": "no products file in upload"}), 400

    logger.info("Import request: families=%s products=%s",
                families.filename, products.filename)

    try:
        result = run_import(families.read(), products.read(), reporter=FailureReporter())
    except CsvFormatError as exc:
        return jsonify({"success": False, "error": str(exc)}), 400
    except ImportAbortedError as exc:
        return jsonify({"success": False, "error": str(exc)}), 500

    body = result.to_dict()
    # Clients fetch reports through /import/failures/<name>
    body["failureFiles"] = {
        kind: Path(path).name if path else None
        for kind, path in result.failure_files.items()
    }
    return jsonify({"success": True, "message": "Import completed", **body})


@api_bp.route("/import/failures/<name>")
def api_import_failures(name: str):
    """GET /api/v1/import/failures/{name}  → the failure CSV"""
    path = FailureReporter().resolve(name)
    if path is None:
        return jsonify({"error": "not found"}), 404
    return send_file(path, mimetype="text/csv", as_attachment=True, download_name=path.name)
