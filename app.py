import os
from flask import send_from_directory
from storefront_seo import create_app

app = create_app()

@app.route('/assets/<path:filename>')
def serve_assets(filename):
    return send_from_directory(os.path.join(app.static_folder, 'assets'), filename)

@app.route('/uploads/<path:filename>')
def serve_uploads(filename):
    return send_from_directory(os.path.join(app.static_folder, 'uploads'), filename)

if __name__ == '__main__':
    port = int(os.getenv('PORT', 5055))
    app.run(host='0.0.0.0', port=port, debug=True)
