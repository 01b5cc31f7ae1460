# app.py
import argparse
import json
import os
from datetime import datetime
from urllib.parse import urlparse

from flask import Flask, request, jsonify

from qa_scanner import QAScanner, DocumentUnavailableError, RenderMetrics
from qa_scanner.config import load_config
from qa_scanner.scoring import summarize_report

DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 5000


def normalize_url(url):
    if not url.startswith(('http://', 'https://', 'file://')):
        return 'http://' + url
    return url


def is_valid_url(url):
    try:
        result = urlparse(normalize_url(url))
        return bool(result.scheme and (result.netloc or result.scheme == 'file'))
    except ValueError:
        return False


def _parse_metrics(payload):
    raw = payload.get('metrics')
    if raw is None:
        return None
    return RenderMetrics.from_dict(raw)


def create_app(scanner=None, config=None):
    """Builds the Flask API around an injected scanner (one is created from config if omitted)."""
    app = Flask(__name__)
    app.config['QA_SCANNER'] = scanner if scanner else QAScanner(config=config)

    @app.route('/health', methods=['GET'])
    def health_endpoint():
        return jsonify({"status": "ok"})

    @app.route('/scan', methods=['POST', 'GET'])
    def scan_endpoint():
        if request.method == 'GET':
            payload = request.args.to_dict()
            payload['render'] = payload.get('render', '').lower() in ('1', 'true', 'yes')
        else:
            payload = request.get_json(silent=True)
            if not isinstance(payload, dict):
                return jsonify({"success": False, "error": "Invalid JSON payload"}), 400

        url_to_scan = payload.get('url')
        if not url_to_scan:
            return jsonify({"success": False, "error": "URL parameter is required"}), 400
        if not is_valid_url(url_to_scan):
            return jsonify({"success": False, "error": f"Invalid URL provided: {url_to_scan}"}), 400
        url_to_scan = normalize_url(url_to_scan)

        active_scanner = app.config['QA_SCANNER']
        try:
            if payload.get('html') is not None:
                if not isinstance(payload['html'], str):
                    return jsonify({"success": False, "error": "html must be a string"}), 400
                report = active_scanner.scan_html(url_to_scan, payload['html'], _parse_metrics(payload))
            else:
                report = active_scanner.scan_url(url_to_scan, render=bool(payload.get('render')))
        except DocumentUnavailableError as e:
            return jsonify({"success": False, "error": str(e)}), 502
        except ValueError as e:
            return jsonify({"success": False, "error": f"Invalid scan request: {e}"}), 400

        return jsonify({"success": True, "report": report.to_dict(), "summary": summarize_report(report)})

    return app


def format_text_report(report):
    lines = [f"URL: {report.url}", f"Timestamp: {report.timestamp}", ""]
    for key, result in report.categories.items():
        lines.append(f"[{key}] score {result.score}")
        for issue in result.issues:
            lines.append(f"  - {issue.severity.value.upper()}: {issue.message}")
        for passed in result.passes:
            lines.append(f"  + {passed}")
        lines.append("")
    return "\n".join(lines)


def save_report_to_file(report, output_format="json", filename_prefix="qa_report"):
    if not os.path.exists("reports"):
        os.makedirs("reports")
    timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
    safe_domain_name = (urlparse(report.url).netloc or "local").replace(".", "_").replace(":", "_")
    filename = f"reports/{filename_prefix}_{safe_domain_name}_{timestamp}.{output_format}"
    try:
        with open(filename, "w") as f:
            if output_format == "json":
                json.dump(report.to_dict(), f, indent=4)
            else:
                f.write(format_text_report(report))
        print(f"Report saved to {filename}")
        return filename
    except IOError as e:
        print(f"Error saving report: {e}")
        return None


def print_summary(report):
    summary = summarize_report(report)
    counts = summary["issue_counts"]
    print("\n--- Scan Summary ---")
    print(f"URL Scanned: {summary['url']}")
    print(f"Timestamp: {summary['timestamp']}")
    print(f"Overall Score: {summary['overall_score']}")
    print(f"Issues: {counts['total']} ({counts['critical']} critical, {counts['warning']} warning, {counts['info']} info)")
    for key, score in summary["category_scores"].items():
        print(f"  {key}: {score}")


def build_parser():
    parser = argparse.ArgumentParser(description="Single-page QA scanner")
    parser.add_argument("url", nargs='?', default=None, help="The URL to scan (omit to run in API/server mode).")
    parser.add_argument("--html-file", type=str, default=None, help="Scan this local HTML file as the content of URL instead of fetching it.")
    parser.add_argument("--render", action="store_true", help="Render the page in headless Chromium (requires Playwright) to collect layout metrics.")
    parser.add_argument("--output", choices=["json", "txt"], default="json", help="Output format for the saved report.")
    parser.add_argument("--save", action="store_true", help="Save the report under ./reports.")
    parser.add_argument("--config", type=str, default=None, help="Path to a JSON config file.")
    parser.add_argument("--host", type=str, default=DEFAULT_HOST, help="Host for API mode.")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="Port for API mode.")
    return parser


def run_cli(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    current_config = load_config(args.config)
    scanner = QAScanner(config=current_config)

    # If URL is not provided, run in API/server mode. Otherwise, run in CLI mode.
    if not args.url:
        print(f"Starting Flask server on http://{args.host}:{args.port}/ (API mode)")
        create_app(scanner=scanner).run(host=args.host, port=args.port, debug=False)
        return 0

    if not is_valid_url(args.url):
        print(f"Error: Invalid URL provided: {args.url}")
        return 2
    url = normalize_url(args.url)

    print(f"Starting QA scan for: {url}")
    try:
        if args.html_file:
            with open(args.html_file, "rb") as f:
                report = scanner.scan_html(url, f.read())
        else:
            report = scanner.scan_url(url, render=args.render)
    except DocumentUnavailableError as e:
        print(f"Error: {e}")
        return 1
    except OSError as e:
        print(f"Error reading {args.html_file}: {e}")
        return 1

    print_summary(report)
    if args.save:
        save_report_to_file(report, output_format=args.output)
    else:
        print(report.to_json(indent=2) if args.output == "json" else format_text_report(report))
    return 0


if __name__ == "__main__":
    raise SystemExit(run_cli())
