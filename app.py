import os

from interview_stats import create_app
from interview_stats.logging import get_logger

logger = get_logger("server")

app = create_app()

if __name__ == '__main__':
    port = int(os.getenv("PORT") or 5000)
    logger.info(f"serving interview stats on :{port}")
    app.run(host="0.0.0.0", port=port, debug=os.getenv("FLASK_DEBUG") == "1")
