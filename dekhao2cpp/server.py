from flask import Blueprint, Flask, current_app, jsonify, request
from flask_cors import CORS

from .codegen import generate_cpp
from .config import Config
from .lexer import NoInputError, format_tokens, tokenize_source
from .parser import parse_tokens

bp = Blueprint("convert", __name__)


@bp.route("/convert", methods=["POST"])
def convert():
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        data = {}
    code = data.get("code")

    if not isinstance(code, str):
        return jsonify({"error": "No code provided"}), 400

    try:
        tokens = tokenize_source(code)
        program = generate_cpp(parse_tokens(tokens))
    except NoInputError:
        # Empty source is reported separately so the frontend can tell it
        # apart from source with nothing recognizable in it.
        return jsonify({"error": "no_input"}), 400
    except Exception as e:  # Fallback
        current_app.logger.exception("conversion failed")
        return jsonify({"error": f"Internal error: {e}"}), 500

    result = {
        "cpp": program.render(),
        "features": sorted(f.value for f in program.features),
    }
    if data.get("tokens"):
        result["tokens"] = format_tokens(tokens)
    return jsonify(result)


@bp.route("/health", methods=["GET"])
def health():
    return jsonify({"status": "ok"})


def create_app(test_config=None):
    app = Flask(__name__)
    app.config.from_object(Config)
    if test_config is None:
        app.config.from_prefixed_env("DEKHAO2CPP")
    else:
        app.config.from_mapping(test_config)

    CORS(app, resources={r"/convert": {"origins": app.config["CORS_ORIGINS"]}})
    app.register_blueprint(bp)
    return app


app = create_app()


if __name__ == "__main__":
    app.run(host=app.config["HOST"], port=app.config["PORT"], debug=app.config["DEBUG"])
