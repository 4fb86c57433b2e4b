import os

from dotenv import load_dotenv

load_dotenv()

MONGODB_URI = os.getenv("MONGODB_URI", "mongodb://localhost:27017/person-db")
DATABASE_NAME = os.getenv("DATABASE_NAME", "person-db")
CORS_ORIGIN = os.getenv("CORS_ORIGIN", "http://localhost:5173")
UPLOAD_DIR = os.getenv("UPLOAD_DIR", "uploads")

# Upper bound for a single database call before it is reported as unavailable
STORE_TIMEOUT_SECONDS = float(os.getenv("STORE_TIMEOUT_SECONDS", "5"))

EXCHANGE_RATE_API_URL = os.getenv("EXCHANGE_RATE_API_URL")
EXCHANGE_RATE_API_KEY = os.getenv("EXCHANGE_RATE_API_KEY")

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
PORT = int(os.getenv("PORT", "5000"))
