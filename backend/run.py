import os
from health_tracker import create_app

app = create_app(os.environ.get('FLASK_CONFIG', 'default'))

if __name__ == '__main__':
    app.run(port=int(os.environ.get('PORT', 5000)))
