import os
import sys
import tempfile
from pathlib import Path

import pytest_asyncio
from httpx import AsyncClient, ASGITransport

# Configure test environment: a throwaway SQLite file instead of Postgres
_DB_DIR = tempfile.mkdtemp(prefix='blogapi-tests-')
os.environ['DATABASE_URL'] = f"sqlite+aiosqlite:///{os.path.join(_DB_DIR, 'test.db')}"

# Ensure the package root is on sys.path when pytest changes CWD to this tests dir
HERE = Path(__file__).resolve()
PKG_ROOT = HERE.parents[2]
if str(PKG_ROOT) not in sys.path:
    sys.path.insert(0, str(PKG_ROOT))


@pytest_asyncio.fixture
async def client():
    """App client over a freshly created schema."""
    from blogapi.main import app
    from blogapi.models import Base, engine

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)
    async with AsyncClient(transport=ASGITransport(app=app), base_url='http://test') as ac:
        yield ac
    await engine.dispose()


@pytest_asyncio.fixture
async def user(client):
    res = await client.post('/users/', json={'name': 'A', 'username': 'a'})
    assert res.status_code == 200, res.text
    return res.json()


@pytest_asyncio.fixture
async def post(client, user):
    res = await client.post('/posts/', json={'title': 'T', 'content': 'C', 'userID': user['id']})
    assert res.status_code == 200, res.text
    return res.json()
