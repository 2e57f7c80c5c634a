import pytest


@pytest.mark.asyncio
async def test_healthz(client):
    res = await client.get('/healthz')
    assert res.status_code == 200
    assert res.json() == {'status': 'ok'}


@pytest.mark.asyncio
async def test_missing_user(client):
    res = await client.get('/users/1')
    assert res.status_code == 404


@pytest.mark.asyncio
async def test_openapi_lists_routes(client):
    res = await client.get('/openapi.json')
    assert res.status_code == 200
    paths = res.json()['paths']
    assert '/posts/{post_id}/comments' in paths
    assert paths['/users/{post_id}/comments']['get']['deprecated'] is True
