from __future__ import annotations

import json
import logging

from flask import Flask, Response, request
from werkzeug.exceptions import HTTPException

from anichin.config import SETTINGS
from anichin.errors import InvalidInput, ScraperError
from anichin.scraper import AnichinScraper
from anichin.text import clean

logger = logging.getLogger(__name__)

CACHE_CONTROL = "s-maxage=300, stale-while-revalidate=600"

app = Flask(__name__)
scraper = AnichinScraper(SETTINGS)


def json_response(payload: dict, status: int = 200) -> Response:
    body = json.dumps(payload, ensure_ascii=False)
    response = Response(body, status=status, content_type="application/json; charset=utf-8")
    response.headers["Cache-Control"] = CACHE_CONTROL
    return response


def success(data) -> Response:
    return json_response({"success": True, "data": data})


def failure(message: str | None, status: int = 500) -> Response:
    return json_response({"success": False, "message": message or "Internal error"}, status)


@app.before_request
def reject_non_get():
    if request.method != "GET":
        return failure("Method not allowed", 405)


@app.errorhandler(ScraperError)
def handle_scraper_error(error: ScraperError):
    return failure(error.message, error.status_code)


@app.errorhandler(HTTPException)
def handle_http_error(error: HTTPException):
    if error.code == 405:
        return failure("Method not allowed", 405)
    return failure(error.name, error.code or 500)


@app.errorhandler(Exception)
def handle_unexpected(error: Exception):
    logger.exception("Unhandled error serving %s", request.path)
    return failure(str(error), 500)


@app.route("/api/anime/home")
def home():
    return success(scraper.get_home().to_dict())


@app.route("/api/anime/ongoing")
def ongoing():
    return success([item.to_dict() for item in scraper.get_ongoing()])


@app.route("/api/anime/completed")
def completed():
    return success([item.to_dict() for item in scraper.get_completed()])


@app.route("/api/anime/search")
def search():
    query = request.args.get("q", "")
    if not query.strip():
        return success([])
    return success([item.to_dict() for item in scraper.search(query)])


@app.route("/api/anime/genres")
def genres():
    return success(scraper.get_genres())


@app.route("/api/anime/detail/<slug>")
def detail(slug):
    if not clean(slug):
        raise InvalidInput("Slug is required")
    return success(scraper.get_detail(slug).to_dict())


@app.route("/api/anime/stream", defaults={"slug": None})
@app.route("/api/anime/stream/<slug>")
def stream(slug):
    slug = slug if slug is not None else request.args.get("slug", "")
    if not clean(slug):
        raise InvalidInput("Slug is required")
    return success(scraper.get_stream(slug).to_dict())


def run(host: str | None = None, port: int | None = None):
    logging.basicConfig(
        level=getattr(logging, SETTINGS.log_level, logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app.run(debug=False, host=host or SETTINGS.host, port=port or SETTINGS.port)


if __name__ == "__main__":
    run()
