"""
Serve the training plan: calendar subscription, CSV/JSON exports, stats
and JSON import from other devices.

Usage:
    python3 plan_server.py [port]   # default 8080
"""

import sys

from dotenv import load_dotenv
from flask import Flask, Response, jsonify, request

from training_plan import config
from training_plan.dates import iso_week_key, today_iso
from training_plan.export import to_csv, to_json
from training_plan.generator import CalendarGenerator
from training_plan.import_plan import import_document
from training_plan.models import DocumentError
from training_plan.stats import compliance, goal_progress, totals, weekly_summary
from training_plan.store import PlanStore

app = Flask(__name__)

NO_CACHE = {
    'Access-Control-Allow-Origin': '*',
    'Cache-Control': 'no-cache, no-store, must-revalidate',
    'Pragma': 'no-cache',
    'Expires': '0',
}


def get_store():
    return PlanStore(app.config.get('PLAN_DB_PATH') or config.db_path())


@app.route('/training_calendar.ics')
@app.route('/')
def calendar_feed():
    _, sessions = get_store().load()
    generator = CalendarGenerator(**config.calendar_settings())
    body = generator.build_calendar(sessions).to_ical()
    headers = dict(NO_CACHE)
    headers['Content-Disposition'] = 'inline; filename="training_calendar.ics"'
    return Response(body, mimetype='text/calendar', headers=headers)


@app.route('/plan.csv')
def plan_csv():
    _, sessions = get_store().load()
    headers = dict(NO_CACHE)
    headers['Content-Disposition'] = 'attachment; filename="training_plan.csv"'
    return Response(to_csv(sessions), mimetype='text/csv', headers=headers)


@app.route('/plan.json')
def plan_json():
    version, sessions = get_store().load()
    return Response(to_json(sessions, version), mimetype='application/json', headers=NO_CACHE)


@app.route('/stats')
def stats():
    _, sessions = get_store().load()
    settings = config.app_settings()
    return jsonify({
        'compliance': compliance(sessions),
        'totals': totals(sessions),
        'this_week': goal_progress(sessions, iso_week_key(today_iso()),
                                   settings['goal_type'], settings['goal_value']),
        'weeks': weekly_summary(sessions),
    })


@app.route('/import', methods=['POST'])
def import_plan():
    data = request.get_json(silent=True)
    if data is None:
        return jsonify({"success": False, "error": "Body must be JSON"}), 400
    try:
        merged = import_document(data, get_store())
    except DocumentError as e:
        return jsonify({"success": False, "error": str(e)}), 400
    print(f"✓ Imported plan document, {len(merged)} sessions")
    return jsonify({"success": True, "sessions": len(merged)})


if __name__ == '__main__':
    load_dotenv()
    port = 8080

    # Allow custom port from command line
    if len(sys.argv) > 1:
        try:
            port = int(sys.argv[1])
        except ValueError:
            print(f"Invalid port: {sys.argv[1]}")
            print("Usage: python3 plan_server.py [port]")
            sys.exit(1)

    app.run(host='0.0.0.0', port=port)
