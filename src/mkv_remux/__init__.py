"""MKV Remux - build ffmpeg remux command lines from ffprobe stream metadata."""

__version__ = "1.0.0"
