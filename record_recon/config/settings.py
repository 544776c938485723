import os


def split_fields(raw):
    fields = [field.strip() for field in raw.split(",") if field.strip()]
    return list(dict.fromkeys(fields))


class Settings:
    """Configuration settings for the reconciliation process."""

    def __init__(self):
        # Output
        self.OUTPUT_DIR = os.getenv("RECON_OUTPUT_DIR", "recon_output")
        self.SUMMARY_FILE = os.getenv("RECON_SUMMARY_FILE", "summary.json")

        # Matching
        self.KEY_FIELD = os.getenv("RECON_KEY_FIELD", "email")
        self.COMPARED_FIELDS = split_fields(
            os.getenv("RECON_COMPARED_FIELDS", "first_name,last_name,encrypted_password")
        )

        # CSV format
        self.CSV_DELIMITER = os.getenv("RECON_CSV_DELIMITER", ",")
        self.CSV_ENCODING = os.getenv("RECON_CSV_ENCODING", "utf-8")

        # Logging
        self.LOG_LEVEL = os.getenv("RECON_LOG_LEVEL", "INFO").upper()


# Create a singleton instance
settings = Settings()
