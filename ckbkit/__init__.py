"""Hex helpers, hashes, epoch packing, Molecule encoding and Omnilock types for CKB."""

__version__ = "0.1.0"