"""
Esports Management Backend Runner
Run this file from root directory to start the API server
"""
import sys
import os

# Store the absolute root directory
ROOT_DIR = os.path.abspath(os.path.dirname(__file__))

# Add BACKEND folders to Python path (using absolute paths)
sys.path.insert(0, os.path.join(ROOT_DIR, 'BACKEND', 'core'))
sys.path.insert(0, os.path.join(ROOT_DIR, 'BACKEND', 'models'))
sys.path.insert(0, os.path.join(ROOT_DIR, 'BACKEND', 'routes'))
sys.path.insert(0, os.path.join(ROOT_DIR, 'BACKEND', 'services'))
sys.path.insert(0, os.path.join(ROOT_DIR, 'BACKEND', 'database'))
sys.path.insert(0, ROOT_DIR)

# Import and run the app
from app import create_app

if __name__ == '__main__':
    port = int(os.environ.get('PORT', 3000))
    print("=" * 60)
    print("Esports Management API Starting...")
    print("=" * 60)
    print(f"URL: http://localhost:{port}")
    print("=" * 60)

    app = create_app(os.environ.get('FLASK_ENV', 'development'))
    app.run(debug=app.config.get('DEBUG', False), host='0.0.0.0', port=port, use_reloader=False)
