# resizepdf/__init__.py
import importlib
import logging
import pkgutil

from flask import Flask, Response, jsonify, render_template, url_for
from werkzeug.exceptions import HTTPException

from . import registry
from .artifacts import init_stores
from .config import Config
from .logging_config import configure_logging

logger = logging.getLogger(__name__)


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config:
        app.config.update(test_config)

    configure_logging(app.config["LOG_LEVEL"])
    init_stores(app)

    # Auto-discover and register all blueprints: resizepdf.tools.<module>.routes:bp
    from . import tools
    for _finder, name, _ispkg in pkgutil.iter_modules(tools.__path__, tools.__name__ + "."):
        try:
            mod = importlib.import_module(f"{name}.routes")
        except ModuleNotFoundError as e:
            if e.name != f"{name}.routes":
                raise
            continue  # module without routes.py is fine
        bp = getattr(mod, "bp", None)
        if bp:
            app.register_blueprint(bp)
            logger.debug("registered tool blueprint %s", bp.name)

    # Every HTTP error, ours or werkzeug's, leaves as {"error": "..."}
    @app.errorhandler(HTTPException)
    def http_error(e):
        return jsonify({"error": e.description}), e.code

    # Landing page: one card per registered tool
    @app.get("/")
    def home():
        return render_template("home.html", tools=registry.TOOLS)

    # Crawlers get the landing page; the POST-only tool API is off limits
    @app.get("/robots.txt")
    def robots():
        lines = [
            "User-agent: *",
            "Allow: /",
            "Disallow: /api/",
            f"Sitemap: {url_for('sitemap', _external=True)}",
        ]
        return Response("\n".join(lines), mimetype="text/plain")

    # Only GET pages belong here, which today is just the landing page
    @app.get("/sitemap.xml")
    def sitemap():
        urls = [app.config["SITE_BASE_URL"].rstrip("/") + "/"]
        xml = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            '<urlset xmlns="http://www.sitemaps.org/schemas/sitemap/0.9">',
        ]
        xml += [f"<url><loc>{u}</loc></url>" for u in urls]
        xml.append("</urlset>")
        return Response("\n".join(xml), mimetype="application/xml")

    return app
