# scripts/init_db.py

"""
설정된 DATABASE_URL에 employees 테이블을 생성합니다.

    python scripts/init_db.py
"""

import asyncio

import typer

from app.core.config import settings
from app.core.database import Database

cli = typer.Typer()


async def init_database(db: Database) -> bool:
    """테이블을 생성하고 연결 상태를 확인합니다."""
    try:
        await db.create_tables()
        return await db.ping()
    finally:
        await db.dispose()


@cli.command()
def main():
    """
    Employee API가 사용하는 데이터베이스 테이블을 생성합니다.
    """
    typer.echo("데이터베이스 테이블 생성을 시작합니다...")
    if not asyncio.run(init_database(Database.from_settings(settings))):
        typer.echo("오류: 데이터베이스 연결 확인에 실패했습니다.")
        raise typer.Exit(code=1)
    typer.echo("데이터베이스 테이블이 준비되었습니다.")


if __name__ == "__main__":
    cli()
