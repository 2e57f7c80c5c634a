import pytest


class TestComments:
    """Comment endpoints"""

    @pytest.mark.asyncio
    async def test_create_without_post_check(self, client):
        res = await client.post('/comments/', json={'id': 5, 'text': 'hi', 'postID': 123, 'userID': 9})
        assert res.status_code == 200, res.text
        assert res.json() == {'id': 1, 'text': 'hi', 'userID': 9, 'postID': 123}

    @pytest.mark.asyncio
    async def test_create_requires_post_id(self, client):
        res = await client.post('/comments/', json={'text': 'hi'})
        assert res.status_code == 400

    @pytest.mark.asyncio
    async def test_get(self, client, post):
        c = (await client.post('/comments/', json={'text': 'hi', 'postID': post['id']})).json()

        res = await client.get(f"/comments/{c['id']}")
        assert res.status_code == 200
        assert res.json()['text'] == 'hi'

        assert (await client.get('/comments/8')).status_code == 404
        res = await client.get('/comments/1.5')
        assert res.status_code == 400
        assert res.json()['detail'] == 'Invalid comment ID'

    @pytest.mark.asyncio
    async def test_update_replaces_fields(self, client, post):
        c = (await client.post('/comments/', json={'text': 'hi', 'postID': post['id'], 'userID': 3})).json()

        res = await client.put(f"/comments/{c['id']}", json={'id': 40, 'text': 'edited', 'postID': post['id']})
        assert res.status_code == 200, res.text
        assert res.json() == {'id': c['id'], 'text': 'edited', 'userID': None, 'postID': post['id']}

        assert (await client.get('/comments/40')).status_code == 404

    @pytest.mark.asyncio
    async def test_update_missing_is_404(self, client):
        res = await client.put('/comments/12', json={'text': 'ghost', 'postID': 1})
        assert res.status_code == 404
        assert (await client.get('/comments/12')).status_code == 404

    @pytest.mark.asyncio
    async def test_delete_returns_record(self, client, post):
        c = (await client.post('/comments/', json={'text': 'bye', 'postID': post['id']})).json()

        res = await client.delete(f"/comments/{c['id']}")
        assert res.status_code == 200
        assert res.json() == c

        assert (await client.get(f"/comments/{c['id']}")).status_code == 404
        assert (await client.delete(f"/comments/{c['id']}")).status_code == 404
