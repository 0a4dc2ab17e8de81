"""
Tests for the JSON API.
"""

from __future__ import annotations

from profiles import DEFAULT_SCORING_CONFIG


def test_health(client):
    response = client.get('/health')
    assert response.status_code == 200
    assert response.get_json() == {'status': 'ok'}


def test_business_models(client):
    models = client.get('/api/business-models').get_json()
    assert len(models) == len(DEFAULT_SCORING_CONFIG.model_ids)
    assert {'id': 'copywriting', 'name': 'Copywriting / Ghostwriting'} in models


def test_matches(client, sample_answers):
    response = client.post('/api/business-model-matches', json=sample_answers)
    assert response.status_code == 200
    matches = response.get_json()['matches']
    assert len(matches) == len(DEFAULT_SCORING_CONFIG.model_ids)
    assert set(matches[0]) == {'id', 'name', 'score', 'category'}
    assert matches[0]['category'] == 'Best Fit'


def test_matches_limit(client, sample_answers):
    response = client.post('/api/business-model-matches?limit=3', json=sample_answers)
    assert len(response.get_json()['matches']) == 3


def test_bad_limit_is_rejected(client):
    response = client.post('/api/business-model-matches?limit=many', json={})
    assert response.status_code == 400
    assert 'limit' in response.get_json()['error']


def test_empty_body_is_an_empty_record(client):
    response = client.post('/api/business-model-matches')
    assert response.status_code == 200
    assert len(response.get_json()['matches']) == len(DEFAULT_SCORING_CONFIG.model_ids)


def test_non_object_body_is_rejected(client):
    for body in ('[1, 2]', 'not json'):
        response = client.post('/api/normalized-traits', data=body, content_type='application/json')
        assert response.status_code == 400
        assert 'error' in response.get_json()


def test_single_match(client, sample_answers):
    response = client.post('/api/business-model-matches/freelancing', json=sample_answers)
    assert response.status_code == 200
    assert response.get_json()['id'] == 'freelancing'


def test_unknown_model_is_404(client):
    response = client.post('/api/business-model-matches/nope', json={})
    assert response.status_code == 404
    assert 'nope' in response.get_json()['error']


def test_normalized_traits_report_fallbacks(client):
    body = client.post('/api/normalized-traits', json={'firstIncomeTimeline': 'someday'}).get_json()
    assert body['traits']['speedToIncome'] == 0.5
    assert {'field': 'firstIncomeTimeline', 'reason': 'unrecognized', 'value': 'someday'} in body['fallbacks']


def test_trait_summary(client, max_answers):
    body = client.post('/api/trait-summary?model=copywriting', json=max_answers).get_json()
    assert body['traits']['riskTolerance'] == 100
    assert body['model'] == 'copywriting'
    assert body['ideal']['riskTolerance'] == 45

    plain = client.post('/api/trait-summary', json=max_answers).get_json()
    assert 'ideal' not in plain

    assert client.post('/api/trait-summary?model=nope', json={}).status_code == 404


def test_personality_scores(client):
    body = client.post('/api/personality-scores', json={}).get_json()
    assert set(body['scores']) == set(body['descriptions'])
    assert len(body['scores']) == 12
