#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
QR Generator - Flask Web Application

Ejecutar:
    python app.py
Abrir:
    http://127.0.0.1:5000/
"""

import base64
import logging
from io import BytesIO
from typing import Optional, Tuple

from flask import Flask, render_template_string, request, send_file

from qrgen import QREncodeError, make_qr, render_png_bytes, render_svg_from_matrix

# Configure logging
logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

DEFAULT_CONFIG = {
    'IMAGE_SIZE': 600,
    'BORDER': 4,
    'SCALE': 10,
}

TEMPLATE = """
<!doctype html>
<html>
<head>
  <meta charset="utf-8">
  <title>QR Generator</title>
  <style>
    body{font-family:Inter, Arial, sans-serif; padding:18px; background:#fff; color:#222}
    input[type="text"], select, input[type="number"]{padding:6px 8px; font-family:monospace; border:1px solid #ccc; border-radius:6px}
    button{padding:10px 16px; border-radius:8px; border:1px solid #333; background:#111; color:#fff; cursor:pointer}
    .card{margin-top:18px; border:1px solid #ddd; border-radius:10px; padding:14px}
    img{display:block; margin:8px 0; border:1px solid #ccc}
    .metrics{font-size:13px; color:#333; line-height:1.4}
    .error{color:#b00; font-weight:700}
  </style>
</head>
<body>
  <h2>QR Generator (v1-2, ECC Q, byte mode)</h2>
  <form method="post">
    <input type="text" name="text" size="40" maxlength="64" value="{{ text }}">
    <select name="mask">
      <option value="auto" {% if mask == 'auto' %}selected{% endif %}>auto</option>
      {% for m in range(8) %}
      <option value="{{ m }}" {% if mask == m|string %}selected{% endif %}>{{ m }}</option>
      {% endfor %}
    </select>
    <input type="number" name="border" min="0" max="20" value="{{ border }}">
    <button type="submit">Generar</button>
  </form>
  {% if error %}<p class="error">{{ error }}</p>{% endif %}
  {% if qr %}
  <div class="card">
    <img src="data:image/png;base64,{{ qr.img_b64 }}" width="{{ qr.px }}" height="{{ qr.px }}">
    <div class="metrics">
      version: {{ qr.version }} ({{ qr.size }}x{{ qr.size }}) &middot; ecc: Q &middot;
      mask: {{ qr.mask }} (penalty {{ qr.penalty }})<br>
      mask scores: {{ qr.mask_scores_text }}
    </div>
  </div>
  {% endif %}
</body>
</html>
"""


def _read_params(req, default_border: int) -> Tuple[str, str, int]:
    """Extract and validate QR generation parameters from Flask request."""
    text = (req.values.get('text') or "").strip()
    mask = (req.values.get('mask') or "auto").strip().lower()
    if mask != 'auto' and mask not in {str(m) for m in range(8)}:
        mask = 'auto'

    try:
        border = int(req.values.get('border') or default_border)
        if border < 0 or border > 20:
            border = default_border
    except (ValueError, TypeError):
        border = default_border

    return text, mask, border


def create_app(config: Optional[dict] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(DEFAULT_CONFIG)
    app.config.from_prefixed_env("QRGEN")
    if config:
        app.config.from_mapping(config)

    @app.route('/', methods=['GET', 'POST'])
    def index():
        text, mask, border = _read_params(request, app.config['BORDER'])
        qr_view = None
        error = None

        if request.method == 'POST':
            if not text:
                error = "Enter the text to encode."
            else:
                try:
                    logger.info("Generating QR code: %d chars, mask=%s", len(text), mask)
                    qr = make_qr(text, mask=mask)
                except QREncodeError as ex:
                    error = f"Could not generate the QR code: {ex}"
                    logger.error("QR generation failed: %s", ex)
                    qr = None

                if qr:
                    size_px = app.config['IMAGE_SIZE']
                    png = render_png_bytes(qr.matrix, size_px, border=border)
                    qr_view = {
                        'version': qr.version,
                        'size': qr.size,
                        'px': size_px,
                        'img_b64': base64.b64encode(png).decode('ascii'),
                        'mask': qr.mask,
                        'penalty': qr.penalty,
                        'mask_scores_text': ", ".join(f"{k}:{v}" for k, v in sorted(qr.scores.items())),
                    }

        return render_template_string(
            TEMPLATE, text=text, mask=mask, border=border, qr=qr_view, error=error
        )

    @app.route('/export/png', methods=['GET'])
    def export_png():
        text, mask, border = _read_params(request, app.config['BORDER'])
        if not text:
            return "Missing text", 400
        try:
            qr = make_qr(text, mask=mask)
        except QREncodeError as ex:
            return str(ex), 400
        try:
            size_px = int(request.values.get('size') or app.config['IMAGE_SIZE'])
        except ValueError:
            size_px = app.config['IMAGE_SIZE']
        if size_px <= 0 or size_px > 4000:
            size_px = app.config['IMAGE_SIZE']

        buf = BytesIO(render_png_bytes(qr.matrix, size_px, border=border))
        return send_file(buf, as_attachment=True, download_name='qr.png', mimetype='image/png')

    @app.route('/export/svg', methods=['GET'])
    def export_svg():
        text, mask, border = _read_params(request, app.config['BORDER'])
        if not text:
            return "Missing text", 400
        try:
            qr = make_qr(text, mask=mask)
        except QREncodeError as ex:
            return str(ex), 400

        svg_bytes = render_svg_from_matrix(qr.matrix, border=border, scale=app.config['SCALE'])
        return send_file(BytesIO(svg_bytes), as_attachment=True,
                         download_name='qr.svg', mimetype='image/svg+xml')

    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
