"""Route groups for the uploader.

- files: listing page and multipart upload on ``/``
"""
