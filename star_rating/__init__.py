"""Star rating strip renderer.

Renders "N out of M stars" images as PNG and serves them over HTTP with a
process-local cache of recently rendered strips.

Entry points:

* :func:`star_rating.params.normalize_params` clamps raw request values into
    a :class:`~star_rating.params.RenderParameters`.
* :func:`star_rating.renderer.strip.render_stars_png` composes and encodes a
    strip from the two star assets under ``<content_root>/Images``.
* :func:`star_rating.server.create_app` builds the FastAPI application.
"""
