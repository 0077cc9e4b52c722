"""
Flask web server for Classic Quotes.

Routes
──────
GET  /                      Quote page (optional ?topic= runs a lookup on load)
GET  /api/topics            Sorted list of every topic (JSON)
GET  /api/quotes?topic=...  Up to MAX_RESULTS random quotes for a topic (JSON)
"""

from __future__ import annotations

import logging
import os
import sys

from dotenv import load_dotenv
from flask import Flask, jsonify, render_template, request, url_for
from werkzeug.exceptions import HTTPException

# Allow running as `python web/app.py` from the project root
sys.path.insert(0, os.path.join(os.path.dirname(__file__), ".."))

load_dotenv()

from config.settings import Settings
from core.corpus import load_corpus
from core.matcher import build_topics, match, normalize_query

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = Settings()
settings.validate()

app = Flask(__name__)

# The corpus and topic index are read-only for the life of the process
CORPUS = load_corpus(settings.quotes_path)
TOPICS = build_topics(CORPUS)


# ── UI ─────────────────────────────────────────────────────────────────────

@app.route("/")
def index():
    """Render the page, revealing quotes when ``?topic=`` is present.

    The form submits back here with GET, so the address bar always carries
    the topic. The template then rewrites it to the trimmed, lower-cased
    form via ``history.replaceState``.
    """
    topic = request.args.get("topic", "")
    normalized = normalize_query(topic)
    results = match(CORPUS, normalized, limit=settings.max_results)

    if normalized:
        canonical_url = url_for("index", topic=normalized)
    else:
        canonical_url = url_for("index")

    return render_template(
        "index.html",
        topic=topic,
        normalized=normalized,
        results=results,
        topics=TOPICS,
        canonical_url=canonical_url,
    )


# ── JSON API ───────────────────────────────────────────────────────────────

@app.route("/api/topics")
def list_topics():
    """Return every distinct topic, sorted ascending."""
    return jsonify(TOPICS)


@app.route("/api/quotes")
def lookup_quotes():
    """Return a random sample of quotes for a topic.

    Query params:
      topic  (optional) — substring matched against quote topics;
                          blank or missing yields an empty list
    """
    normalized = normalize_query(request.args.get("topic"))
    results = match(CORPUS, normalized, limit=settings.max_results)
    return jsonify(
        {
            "topic": normalized,
            "quotes": [q.model_dump() for q in results],
        }
    )


@app.errorhandler(HTTPException)
def http_error(exc: HTTPException):
    """Answer /api/* errors with a JSON body; pages keep the HTML error."""
    if request.path.startswith("/api/"):
        return jsonify({"error": exc.name}), exc.code
    return exc


# ── Entry point ────────────────────────────────────────────────────────────

if __name__ == "__main__":
    app.run(debug=settings.debug, host="0.0.0.0", port=settings.port)
