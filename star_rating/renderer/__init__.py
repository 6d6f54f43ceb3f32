"""Rendering subpackage.

Turns :class:`~star_rating.params.RenderParameters` into a PNG star strip:

* :mod:`star_rating.renderer.assets` loads the filled and blank star images.
* :mod:`star_rating.renderer.strip` lays the stars out left to right, overlays
    the filled star up to the rating (cropping the fractional one), rescales
    and encodes the result.

Compositing is plain Pillow ``alpha_composite`` on an ``RGBA`` canvas.
"""
