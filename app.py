from flask import Flask, request, jsonify, abort

from config import Config
from logger import get_logger
from matching import rank_business_models, find_match, top_matches
from normalizer import normalize_answers_with_diagnostics
from personality import calculate_personality_scores, get_personality_descriptions
from profiles import DEFAULT_SCORING_CONFIG
from trait_summary import calculate_trait_summary, get_ideal_traits, TRAIT_DESCRIPTIONS

# Initialize
app = Flask(__name__)
app.config.from_object(Config)
app.json.sort_keys = False

logger = get_logger(__name__)


def get_answers():
    """Request body as an answer record; an empty body is an empty record"""
    if not request.get_data().strip():
        return {}
    answers = request.get_json(silent=True, force=True)
    if not isinstance(answers, dict):
        abort(400, description='request body must be a JSON object')
    return answers


def get_limit():
    limit = request.args.get('limit')
    if limit is None:
        return None
    try:
        limit = int(limit)
    except ValueError:
        abort(400, description=f'limit must be an integer, got {limit!r}')
    if limit < 0:
        abort(400, description='limit must not be negative')
    return limit


def require_model(model_id):
    if model_id not in DEFAULT_SCORING_CONFIG.model_ids:
        abort(404, description=f'unknown business model {model_id!r}')


@app.errorhandler(400)
@app.errorhandler(404)
def json_error(error):
    return jsonify({'error': error.description}), error.code


# Routes
@app.route('/health')
def health():
    return jsonify({'status': 'ok'})


@app.route('/api/business-models')
def business_models():
    return jsonify([
        {'id': model_id, 'name': DEFAULT_SCORING_CONFIG.display_name(model_id)}
        for model_id in DEFAULT_SCORING_CONFIG.model_ids
    ])


@app.route('/api/business-model-matches', methods=['POST'])
def business_model_matches():
    answers = get_answers()
    limit = get_limit()

    matches = rank_business_models(answers)
    if limit is not None:
        matches = top_matches(matches, limit)
    return jsonify({'matches': matches})


@app.route('/api/business-model-matches/<model_id>', methods=['POST'])
def business_model_match(model_id):
    require_model(model_id)
    match = find_match(rank_business_models(get_answers()), model_id)
    if match is None:
        abort(404, description=f'unknown business model {model_id!r}')
    return jsonify(match)


@app.route('/api/normalized-traits', methods=['POST'])
def normalized_traits():
    traits, fallbacks = normalize_answers_with_diagnostics(get_answers())
    if fallbacks:
        logger.info('normalized_with_fallbacks', count=len(fallbacks))
    return jsonify({
        'traits': traits,
        'fallbacks': [fallback._asdict() for fallback in fallbacks],
    })


@app.route('/api/trait-summary', methods=['POST'])
def trait_summary():
    answers = get_answers()
    result = {
        'traits': calculate_trait_summary(answers),
        'labels': TRAIT_DESCRIPTIONS,
    }

    model_id = request.args.get('model')
    if model_id:
        require_model(model_id)
        result['model'] = model_id
        result['ideal'] = get_ideal_traits(model_id)
    return jsonify(result)


@app.route('/api/personality-scores', methods=['POST'])
def personality_scores():
    scores = calculate_personality_scores(get_answers())
    return jsonify({
        'scores': scores,
        'descriptions': get_personality_descriptions(scores),
    })


if __name__ == '__main__':
    app.run(port=Config.PORT)
