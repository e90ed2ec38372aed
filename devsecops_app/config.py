"""Hard-coded configuration for the demo application.

Every value here is a deliberate anti-pattern: secrets live in source so that
secret scanners in the DevSecOps pipeline have something to flag.
"""

# Intentional vulnerability: hard-coded database password
DB_PASSWORD = "secret123"

# Intentional vulnerability: exposed API key and credentials in the DB URL
API_KEY = "sk-1234567890abcdef"
DB_URL = "jdbc:mysql://localhost:3306/mydb?user=admin&password=admin123"


def get_config() -> str:
    """Return the API key and DB URL, one per line."""
    return f"API Key: {API_KEY}\nDB URL: {DB_URL}"
