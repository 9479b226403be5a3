import os
from dotenv import load_dotenv

load_dotenv()

basedir = os.path.abspath(os.path.dirname(__file__))

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-key-change-in-production'
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or 'sqlite:///tours.db'
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # JWT Configuration
    JWT_SECRET_KEY = os.getenv("JWT_SECRET_KEY") or SECRET_KEY
    JWT_ACCESS_TOKEN_EXPIRES = int(os.getenv("JWT_ACCESS_TOKEN_EXPIRES", 3600))  # 1 hour

    # Payment proof uploads
    UPLOAD_FOLDER = os.getenv("UPLOAD_FOLDER", os.path.join(basedir, 'uploads'))
    PUBLIC_UPLOAD_URL = os.getenv("PUBLIC_UPLOAD_URL", "/uploads")
    MAX_CONTENT_LENGTH = int(os.getenv("MAX_CONTENT_LENGTH", 5 * 1024 * 1024))  # 5MB
    ALLOWED_PROOF_EXTENSIONS = {'png', 'jpg', 'jpeg', 'webp', 'gif'}

    # Fallbacks used when the web_settings row is missing
    DEFAULT_ADVANCE_PER_HEAD = int(os.getenv("DEFAULT_ADVANCE_PER_HEAD", 500))
    DEFAULT_UPI_ID = os.getenv("DEFAULT_UPI_ID", "9876543210@ybl")
    PAYEE_NAME = os.getenv("PAYEE_NAME", "Kerala Tours")
    DEFAULT_CONTACT_EMAIL = os.getenv("DEFAULT_CONTACT_EMAIL", "info@keralatrips.com")
    DEFAULT_CONTACT_PHONE = os.getenv("DEFAULT_CONTACT_PHONE", "+91 98765 43210")

    # Seed administrator (flask db-manage init)
    ADMIN_EMAIL = os.getenv("ADMIN_EMAIL", "admin@keralatrips.com")
    ADMIN_PASSWORD = os.getenv("ADMIN_PASSWORD", "admin12345")

    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
