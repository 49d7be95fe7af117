from io import BytesIO
from os import path, getenv
import logging
from flask import Flask, Response, jsonify, request
from dotenv import load_dotenv
from reviewcard.imaging import CanvasSpec, EmojiRenderer, LayoutOptions, create_review_image
from reviewcard.records import RecordCache

load_dotenv()

# Aspect ratio of the reference 1275x362 banner
CANVAS_RATIO = 1275 / 362

thisDir = path.dirname(path.abspath(__file__))


def _optional_int(name):
    value = getenv(name)
    return int(value) if value else None


class Config:
    """Application configuration."""
    CANVAS_WIDTH = int(getenv("CANVAS_WIDTH", "1275"))
    CANVAS_HEIGHT = _optional_int("CANVAS_HEIGHT") or int(CANVAS_WIDTH / CANVAS_RATIO)
    MAX_LINE_LENGTH = _optional_int("MAX_LINE_LENGTH")  # None lets the optimizer pick the wrap width
    MAX_FONT_SIZE = int(getenv("MAX_FONT_SIZE", "100"))
    BASE_FONT_COLOR = getenv("BASE_FONT_COLOR", "#fff")
    SPECIAL_WORD_FONT_COLOR = getenv("SPECIAL_WORD_FONT_COLOR", "#FB7417")
    SPECIAL_WORD_LIST = [word.strip() for word in getenv("SPECIAL_WORD_LIST", "").split(",") if word.strip()]
    FONT = getenv("FONT", "Outfit-Bold.ttf")  # empty selects Pillow's default font
    FONT_FAMILY = getenv("FONT_FAMILY", "Outfit")
    FONT_WEIGHT = getenv("FONT_WEIGHT", "bold")
    EMOJI_FONT = getenv("EMOJI_FONT")
    BACKGROUND_COLOR = getenv("BACKGROUND_COLOR")
    DATA_PATH = getenv("DATA_PATH", path.join(thisDir, "..", "data", "reviews.csv"))
    DATA_COLUMN = getenv("DATA_COLUMN", "text")


# Configure logging
logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)


def _font_path(font):
    """Resolve a font file relative to the fonts directory, None for the default font."""
    if not font:
        return None
    return path.join(thisDir, "..", "fonts", font)


def _layout_options(config):
    return LayoutOptions(
        max_font_size=config.MAX_FONT_SIZE,
        max_line_length=config.MAX_LINE_LENGTH,
        base_color=config.BASE_FONT_COLOR,
        special_color=config.SPECIAL_WORD_FONT_COLOR,
        special_words=tuple(config.SPECIAL_WORD_LIST),
        emoji=bool(config.EMOJI_FONT)
    )


def create_app(config=Config, records=None):
    """Create the Flask app serving review images."""
    app = Flask(__name__)
    app.config.from_object(config)
    records = records or RecordCache(config.DATA_PATH, config.DATA_COLUMN)
    canvas = CanvasSpec(config.CANVAS_WIDTH, config.CANVAS_HEIGHT)
    options = _layout_options(config)
    emoji_renderer = EmojiRenderer(_font_path(config.EMOJI_FONT)) if config.EMOJI_FONT else None

    @app.before_request
    def log_requests():
        logging.info(f"Request received on {request.path}")

    @app.route("/")
    def home_route():
        return "Canvas %dx%d, max font size %d" % (canvas.width, canvas.height, options.max_font_size)

    @app.route("/review")
    def review_route():
        """Render a random review from the record source."""
        try:
            return _image_response(records.random_text())
        except Exception:
            logging.exception("Failed to render review")
            return _error_response()

    @app.route("/image")
    def image_route():
        """Render the text passed in the query string."""
        text = request.args.get("text", "")
        try:
            return _image_response(text)
        except Exception:
            logging.exception("Failed to render text")
            return _error_response()

    def _image_response(text):
        img = create_review_image(
            canvas, text, _font_path(config.FONT), options,
            font_family=config.FONT_FAMILY, font_weight=config.FONT_WEIGHT,
            background_color=config.BACKGROUND_COLOR, emoji_renderer=emoji_renderer
        )

        buf = BytesIO()
        img.save(buf, format="PNG")
        buf.seek(0)

        logging.debug("Review image generated successfully")
        return Response(buf, 200, mimetype="image/png")

    return app


def _error_response():
    response = jsonify({"error": "Internal server error"})
    response.status_code = 500
    return response


app = create_app()
