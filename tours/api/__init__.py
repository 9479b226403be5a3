# API package
from flask import Flask


def register_blueprints(app: Flask):
    """Attach every API blueprint to the app"""
    from tours.api.auth import auth_bp
    from tours.api.packages import packages_bp
    from tours.api.site import site_bp
    from tours.api.client import client_bp
    from tours.api.admin import admin_bp

    app.register_blueprint(auth_bp)
    app.register_blueprint(packages_bp)
    app.register_blueprint(site_bp)
    app.register_blueprint(client_bp)
    app.register_blueprint(admin_bp)
