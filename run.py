import os

from coachmarket import create_app

app = create_app()

if __name__ == '__main__':
    app.run(port=int(os.getenv('PORT', 5000)))
