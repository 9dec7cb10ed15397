"""Constants shared across tests."""

TEST_FILE_NAME = "report.txt"
TEST_FILE_CONTENT = b"abc"
TEST_FILE_CONTENT_TYPE = "text/plain"
UPLOAD_FIELD = "upload"
