import os

from app import create_app

# WSGI servers (gunicorn, PythonAnywhere, ...) look for `application`
application = create_app(os.environ.get('FLASK_ENV', 'production'))
