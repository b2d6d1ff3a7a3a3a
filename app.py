import logging
from datetime import datetime
from flask import Flask, request, jsonify
from flask_cors import CORS
from pydantic import ValidationError

# Import configuration and processing functions
from config import UPLOAD_FOLDER, API_HOST, API_PORT, API_DEBUG, API_VERSION, MAX_FILE_SIZE, LOG_LEVEL
from ai_processor import GenerationError
from document_loader import ExtractionError, fetch_document, extract_text_from_file, extract_text_from_pdf
from lease_analyzer import LeaseAnalyzer, build_default_analyzer
from schemas import Jurisdiction
from utils import validate_pdf_file, save_upload, safe_file_cleanup, error_response

# Setup logging
logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

EXTRACTION_FAILED_MESSAGE = "Could not extract text from PDF"
ANALYSIS_FAILED_MESSAGE = "Failed to analyze lease agreement"


def create_app(analyzer: LeaseAnalyzer = None) -> Flask:
    """Build the Flask application around a lease analyzer."""
    app = Flask(__name__)
    CORS(app)  # Cross-Origin Resource Sharing configuration for frontend compatibility

    app.config['UPLOAD_FOLDER'] = UPLOAD_FOLDER
    app.config['MAX_CONTENT_LENGTH'] = MAX_FILE_SIZE

    analyzer = analyzer or build_default_analyzer()
    app.extensions['lease_analyzer'] = analyzer

    # --- API ENDPOINTS ---

    @app.route('/ping', methods=['GET'])
    def ping():
        """
        Health check endpoint to verify the server is running.
        Returns server status and timestamp.
        """
        return jsonify({
            "status": "ok",
            "message": "Lease Analyzer API is running",
            "timestamp": datetime.now().isoformat(),
            "version": API_VERSION
        }), 200

    @app.route('/jurisdictions', methods=['GET'])
    def list_jurisdictions():
        """Country codes that have a dedicated legal schema."""
        return jsonify({"countries": analyzer.registry.supported_countries()}), 200

    @app.route('/analyze', methods=['POST'])
    def analyze_lease():
        """
        Analyze a lease for a jurisdiction.

        Accepts either a multipart upload (``file`` plus ``countryCode`` and
        optional ``regionCode`` form fields) or a JSON body with ``fileUrl``,
        ``countryCode`` and optional ``regionCode``.
        """
        filepath = None

        try:
            is_upload = not request.is_json
            params = request.form if is_upload else (request.get_json(silent=True) or {})

            try:
                jurisdiction = Jurisdiction(
                    country_code=params.get('countryCode') or '',
                    region_code=params.get('regionCode'),
                )
            except ValidationError:
                return error_response("Missing 'countryCode' in request", 400)

            document_id = None
            if is_upload:
                file = request.files.get('file')
                is_valid, message = validate_pdf_file(file)
                if not is_valid:
                    return error_response(message, 400)

                filepath = save_upload(file, app.config['UPLOAD_FOLDER'])
                logger.info(f"Processing uploaded document: {file.filename}")
                lease_text = extract_text_from_file(filepath)
            else:
                file_url = params.get('fileUrl')
                if not file_url:
                    return error_response("No file URL provided", 400)

                logger.info(f"Processing document from URL: {file_url}")
                document_id = file_url
                lease_text = extract_text_from_pdf(fetch_document(file_url))

            analysis = analyzer.analyze(
                lease_text,
                jurisdiction.country_code,
                jurisdiction.region_code,
                document_id=document_id,
            )
            return jsonify(analysis.to_payload()), 200

        except ExtractionError as e:
            logger.warning(f"Document extraction failed: {str(e)}")
            return jsonify({"error": EXTRACTION_FAILED_MESSAGE}), 400

        except GenerationError as e:
            logger.error(f"Lease analysis failed: {str(e)}")
            return jsonify({"error": ANALYSIS_FAILED_MESSAGE}), 500

        except Exception as e:
            # Error handling for processing failures
            logger.exception(f"Unexpected error in analyze route: {str(e)}")
            return jsonify({"error": ANALYSIS_FAILED_MESSAGE}), 500

        finally:
            # Temporary file cleanup
            safe_file_cleanup(filepath)

    return app


# --- RUN THE APP ---
if __name__ == '__main__':
    # Application server configuration
    logger.info(f"Starting Lease Analyzer API on {API_HOST}:{API_PORT}")
    create_app().run(host=API_HOST, port=API_PORT, debug=API_DEBUG)
