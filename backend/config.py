import os

class Config:
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'you-will-never-guess'
    # Listen port for run.py
    PORT = int(os.environ.get('PORT', '3000'))
    # Leaderboard page size
    PAGE_SIZE = int(os.environ.get('PAGE_SIZE', '20'))
    # Minimum length for signup handle and password
    MIN_CREDENTIAL_LENGTH = int(os.environ.get('MIN_CREDENTIAL_LENGTH', '6'))
    # Comma-separated list of game client origins
    CORS_ORIGINS = [
        o.strip() for o in os.environ.get(
            'CORS_ORIGINS',
            'http://localhost:5173,http://127.0.0.1:5173,http://localhost:5174,http://127.0.0.1:5174',
        ).split(',') if o.strip()
    ]
    LOG_LEVEL = os.environ.get('LOG_LEVEL', 'INFO')
