"""Calculator version, stamped on batch output."""

VERSION = "2025.10.1"
