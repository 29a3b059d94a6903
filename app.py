import logging

from dotenv import load_dotenv

from flask import Flask, request, jsonify

load_dotenv()

from constants import (
    ANALYSIS_TEMP_DIR,
    CLONE_BACKEND,
    CLONE_TIMEOUT_SECONDS,
    DECODE_ERRORS,
    DEFAULT_BRANCH,
)
from snapshot_analyzer import CloneError, RepositoryAnalyzer, SnapshotError

app = Flask(__name__)
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)
analyzer = RepositoryAnalyzer(
    ANALYSIS_TEMP_DIR,
    clone_timeout=CLONE_TIMEOUT_SECONDS,
    clone_backend=CLONE_BACKEND,
    decode_errors=DECODE_ERRORS,
)


@app.route("/")
def health_check() -> str:
    logger.debug("Health check request received.")
    return "OK"


@app.route("/analyze", methods=["POST"])
def analyze_repo() -> tuple:
    """
    Clone a repository snapshot and return its file/line statistics.

    JSON body: { "url": "https://github.com/owner/repo.git", "branch": "main" }
    branch is optional; when omitted uses DEFAULT_BRANCH.
    """
    body = request.get_json(silent=True) or {}
    if not isinstance(body, dict):
        body = {}
    repo_url = body.get("url") or request.args.get("url")
    if not isinstance(repo_url, str) or not repo_url.strip():
        logger.info("analyze missing url.")
        return jsonify({"error": "Missing 'url' in JSON body or query"}), 400

    branch = body.get("branch") or request.args.get("branch") or DEFAULT_BRANCH
    if not isinstance(branch, str):
        logger.info("analyze invalid branch: %r", branch)
        return jsonify({"error": "'branch' must be a string"}), 400
    branch = branch.strip()

    try:
        logger.info("Analyzing repo: %s branch=%s", repo_url, branch)
        result = analyzer.analyze(repo_url.strip(), branch)
        return jsonify(result.to_dict()), 200
    except ValueError as e:
        logger.info("analyze validation failed: %s", e)
        return jsonify({"error": str(e)}), 400
    except CloneError as e:
        logger.info("Clone failed for %s: %s", repo_url, e)
        return jsonify({"error": str(e)}), 502
    except SnapshotError as e:
        logger.exception("analyze failed.")
        return jsonify({"error": str(e)}), 500


if __name__ == "__main__":
    app.run(debug=True)
