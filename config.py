# Global configuration for share reconstruction
import os

class Config:
    # Arithmetic field
    FIELD_PRIME = int(os.environ.get("SHARE_FIELD_PRIME", 1000000007))
    MIN_BASE = 2
    MAX_BASE = 36

    # Service settings
    SERVICE_HOST = "localhost"
    SERVICE_PORT = int(os.environ.get("SHARE_SERVICE_PORT", 5000))

    # Paths
    DATA_DIR = os.environ.get("SHARE_DATA_DIR", "data")
    RESULTS_FILE = os.path.join(DATA_DIR, "case_results.json")

    # Benchmark parameters
    PERFORMANCE_SAMPLES = 100
