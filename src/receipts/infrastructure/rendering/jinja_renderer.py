"""jinja2-backed receipt renderer.

Templates run in a sandboxed environment with autoescaping on: product
names, fee names and notes all come from store data.
"""

from __future__ import annotations

from pathlib import Path

from jinja2 import FileSystemLoader, StrictUndefined
from jinja2.sandbox import SandboxedEnvironment

from receipts.application.dto import ReceiptViewModel
from receipts.application.ports import ReceiptRenderer

TEMPLATES_DIR = Path(__file__).resolve().parent / "templates"
RECEIPT_TEMPLATE = "order-receipt.html"


class JinjaReceiptRenderer(ReceiptRenderer):

    def __init__(self, template_dir: Path | None = None) -> None:
        self.jinja_env = SandboxedEnvironment(
            loader=FileSystemLoader(template_dir or TEMPLATES_DIR),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            undefined=StrictUndefined,
        )

    def render(self, receipt: ReceiptViewModel) -> str:
        template = self.jinja_env.get_template(RECEIPT_TEMPLATE)
        return template.render(receipt=receipt)
