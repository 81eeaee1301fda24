# scripts/export_openapi.py

"""
라우트 선언으로부터 생성된 OpenAPI 문서를 JSON 파일로 내보냅니다.

    python scripts/export_openapi.py --output openapi.json
"""

import json
from pathlib import Path

import typer

from app.main import app

cli = typer.Typer()


def build_openapi_document() -> dict:
    """FastAPI 앱의 OpenAPI 스키마(dict)를 반환합니다."""
    return app.openapi()


@cli.command()
def main(
    output: Path = typer.Option(
        Path("openapi.json"), '--output', '-o',
        help="OpenAPI 문서를 저장할 파일 경로입니다."
    ),
    indent: int = typer.Option(2, '--indent', help="JSON 들여쓰기 칸 수입니다."),
):
    """
    Employee API의 OpenAPI 문서를 파일로 저장합니다.
    """
    document = build_openapi_document()
    output.write_text(json.dumps(document, indent=indent, ensure_ascii=False), encoding="utf-8")
    typer.echo(f"OpenAPI 문서를 저장했습니다: {output} (paths: {len(document.get('paths', {}))})")


if __name__ == "__main__":
    cli()
