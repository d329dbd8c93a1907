from flask import render_template, request, jsonify
from app.main import main_bp
from app.main.sequence_solver import (
    ALPHABET, HIT_GROUP, TAIL_LABELS, SearchConfig,
    parse_constraint, describe_constraint, solve_sequence,
)
from app.main.sequence_solver.solver_visualizer import (
    SequenceVisualizer, BADGE_COLORS, badges,
)

DEFAULT_TARGET = 49
DEFAULT_CONSTRAINT = 'hit'
# Form field names, same order as the tail (third-last, second-last, last)
TAIL_FIELDS = ('third_last', 'second_last', 'last')

visualizer = SequenceVisualizer()


def parse_target(raw):
    """Target sum from JSON: int or integer string. A blank form field counts as 0."""
    if isinstance(raw, bool):
        raise ValueError(f'Invalid target: {raw!r}')
    if isinstance(raw, int):
        return raw
    if isinstance(raw, str):
        if not raw.strip():
            return 0
        try:
            return int(raw.strip())
        except ValueError:
            pass
    raise ValueError(f'Invalid target: {raw!r} (expected an integer)')


@main_bp.route('/')
def index():
    return render_template(
        "index.html",
        alphabet=ALPHABET,
        hit_group=HIT_GROUP,
        alphabet_badges=badges(ALPHABET),
        badge_colors=BADGE_COLORS,
        default_target=DEFAULT_TARGET,
        default_constraint=DEFAULT_CONSTRAINT,
        tail_fields=list(zip(TAIL_FIELDS, ('Third Last', 'Second Last', 'Last (End)'))),
    )


@main_bp.route('/alphabet')
def alphabet():
    """Alphabet and hit group for legends and form options."""
    return jsonify({
        'alphabet': list(ALPHABET),
        'hit_group': list(HIT_GROUP),
        'badges': badges(ALPHABET),
        'badge_colors': BADGE_COLORS,
    })


@main_bp.route('/solve', methods=['POST'])
def solve():
    """
    Solve for a target sum with constrained tail.

    Request body (JSON):
    {
        "target": int (default: 49),
        "third_last": "any" | "hit" | int (default: "hit"),
        "second_last": "any" | "hit" | int (default: "hit"),
        "last": "any" | "hit" | int (default: "hit"),
        "search": {"max_depth": int, "min_sum": int, "max_sum": int} (optional)
    }

    Returns:
    {
        "success": true,
        "found": true,
        "sequence": [...], "body": [...], "tail": [...],
        "totalLength": 9,
        "cumulativeSteps": [{"step": 0, "value": 0, "sum": 0}, ...],
        "target": 49,
        "constraints": ["Hit Group (-3, -6, -9)", ...],
        "tail_labels": ["3rd", "2nd", "Last"],
        "badges": {"body": [...], "tail": [...]},
        "chart": "base64..."
    }
    """
    data = request.get_json(silent=True) or {}
    if not isinstance(data, dict):
        return jsonify({'error': 'Request body must be a JSON object'}), 400

    try:
        target = parse_target(data.get('target', DEFAULT_TARGET))
        constraints = [parse_constraint(data.get(name, DEFAULT_CONSTRAINT))
                       for name in TAIL_FIELDS]
        config = SearchConfig.from_dict(data.get('search'))
    except (ValueError, TypeError) as e:
        return jsonify({'error': str(e)}), 400

    try:
        result = solve_sequence(target, constraints, config)

        response = result.to_dict()
        response.update({
            'success': True,
            'target': target,
            'constraints': [describe_constraint(c) for c in constraints],
            'tail_labels': list(TAIL_LABELS),
            'badges': {
                'body': badges(result.body),
                'tail': badges(result.tail, is_hit=True),
            },
            'max_depth': config.max_depth,
            'chart': visualizer.chart_png_base64(result, target),
        })
        return jsonify(response)

    except Exception as e:
        return jsonify({'error': str(e)}), 500
