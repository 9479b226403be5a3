from flask import current_app, send_from_directory

from tours.api.site import site_bp


@site_bp.route('/uploads/<path:filename>', methods=['GET'])
def get_upload(filename):
    """Serve a stored payment screenshot"""
    return send_from_directory(current_app.config['UPLOAD_FOLDER'], filename)
