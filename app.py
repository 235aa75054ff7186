import logging
import os

from flask import Flask

from rsaprime.api import primes_bp

logging.basicConfig(level=os.getenv("LOG_LEVEL", "INFO"))

app = Flask(__name__)
app.register_blueprint(primes_bp)

if __name__ == "__main__":
    app.run("127.0.0.1", int(os.getenv("PORT", "8082")), debug=True)
