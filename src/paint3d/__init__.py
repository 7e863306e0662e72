"""paint3d - A small software 3D renderer for 2D vector surfaces.

paint3d builds, transforms and projects 3D meshes and curved paths, and
draws them onto any 2D drawing surface that offers path, fill, stroke,
clip and affine image drawing. Faces are depth sorted with the painter's
algorithm, flat shaded and optionally texture mapped.

Example:
    $ paint3d render sphere sphere.png --rotate-x 30 --subdivide 1

This will write a 640x480 PNG of a shaded sphere.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
