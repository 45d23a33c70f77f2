"""Vercel serverless function for ``/api/generate``.

Receives a prompt from the web page, asks Google Gemini for a completion and
returns the text in the ``candidates`` shape the frontend expects.
"""

from __future__ import annotations

import logging
import sys
from http.server import BaseHTTPRequestHandler
from pathlib import Path

from dotenv import load_dotenv

# Vercel runs this file directly; make the project root importable.
sys.path.insert(0, str(Path(__file__).resolve().parent.parent))

from core.handler import GenerateHandler

load_dotenv()
logging.basicConfig(level=logging.INFO)

logger = logging.getLogger(__name__)

generate = GenerateHandler()


class handler(BaseHTTPRequestHandler):
    def _relay(self):
        length = int(self.headers.get("Content-Length") or 0)
        body = self.rfile.read(length) if length > 0 else None

        response = generate({"method": self.command, "body": body})
        payload = response.encoded_body().encode("utf-8")

        self.send_response(response.status)
        for name, value in response.all_headers().items():
            self.send_header(name, value)
        self.send_header("Content-Length", str(len(payload)))
        self.end_headers()
        if payload and self.command != "HEAD":
            self.wfile.write(payload)

    do_POST = _relay
    do_OPTIONS = _relay
    do_GET = _relay
    do_HEAD = _relay
    do_PUT = _relay
    do_PATCH = _relay
    do_DELETE = _relay

    def log_message(self, format, *args):
        logger.info("%s - %s", self.address_string(), format % args)
