from .api import lattice_image, montage, to_u8

__all__ = ["lattice_image", "montage", "to_u8"]
