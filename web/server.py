"""HTTP 表单前端：单页面，提交表达式后回显结果或错误"""
import logging

from flask import Flask, render_template_string, request

from config.config import SERVER_CONFIG
from core import Calculator, CalculatorError
from utils.formatting import format_result

logger = logging.getLogger(__name__)

PAGE_TEMPLATE = """
<html>
<head><title>Calculator</title></head>
<body>
	<h1>Calculator</h1>
	<form method="POST">
		<input name="expression" value="{{ input }}" />
		<input type="submit" value="Calculate" />
	</form>
	<p>Result: {{ result }}</p>
	<p style="color:red">{{ error }}</p>
</body>
</html>
"""


def create_app(calculator=None):
    app = Flask(__name__)
    calculator = calculator or Calculator()

    @app.route("/", methods=["GET", "POST"])
    def index():
        data = {"input": "", "result": "", "error": ""}
        if request.method == "POST":
            expression = request.form.get("expression", "")
            data["input"] = expression
            try:
                data["result"] = format_result(calculator.evaluate(expression))
            except CalculatorError as e:
                data["error"] = str(e)
            logger.info(f"POST / expression={expression[:50]!r} "
                        f"result={data['result']!r} error={data['error']!r}")
        return render_template_string(PAGE_TEMPLATE, **data)

    return app


def run_server(host=None, port=None, debug=None):
    host = host or SERVER_CONFIG["host"]
    port = port or SERVER_CONFIG["port"]
    debug = SERVER_CONFIG["debug"] if debug is None else debug
    app = create_app()
    logger.info(f"Serving on http://{host}:{port}")
    app.run(host=host, port=port, debug=debug)
