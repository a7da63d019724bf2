"""OpenAPI document served at /swagger/doc.json."""

TOURNAMENT_SCHEMA = {
    'type': 'object',
    'properties': {
        'ID': {'type': 'integer'},
        'Nome': {'type': 'string'},
        'Ano': {'type': 'integer'}
    }
}

TOURNAMENT_INPUT_SCHEMA = {
    'type': 'object',
    'properties': {
        'nome': {'type': 'string'},
        'ano': {'type': 'integer'}
    }
}


def _text(description: str) -> dict:
    return {
        'description': description,
        'content': {'text/plain': {'schema': {'type': 'string'}}}
    }


def _json(description: str, schema: dict) -> dict:
    return {
        'description': description,
        'content': {'application/json': {'schema': schema}}
    }


def build_openapi_document(version: str) -> dict:
    tournament_ref = {'$ref': '#/components/schemas/Torneio'}
    input_body = {
        'required': True,
        'content': {'application/json': {'schema': {'$ref': '#/components/schemas/TorneioInput'}}}
    }
    id_param = {
        'name': 'id',
        'in': 'path',
        'required': True,
        'description': 'ID do torneio',
        'schema': {'type': 'integer'}
    }

    return {
        'openapi': '3.0.3',
        'info': {
            'title': 'API Campeonato',
            'description': 'CRUD de torneios em memória',
            'version': version
        },
        'paths': {
            '/torneios': {
                'post': {
                    'tags': ['torneios'],
                    'summary': 'Cria um novo torneio',
                    'requestBody': input_body,
                    'responses': {
                        '201': _json('Torneio criado', tournament_ref),
                        '400': _text('json inválido'),
                        '405': _text('método não permitido')
                    }
                },
                'get': {
                    'tags': ['torneios'],
                    'summary': 'Lista todos os torneios',
                    'responses': {
                        '200': _json('Torneios em memória', {'type': 'array', 'items': tournament_ref}),
                        '405': _text('método não permitido')
                    }
                }
            },
            '/torneios/{id}': {
                'parameters': [id_param],
                'get': {
                    'tags': ['torneios'],
                    'summary': 'Busca torneio por ID',
                    'responses': {
                        '200': _json('Torneio encontrado', tournament_ref),
                        '400': _text('id inválido'),
                        '404': _text('torneio não encontrado')
                    }
                },
                'put': {
                    'tags': ['torneios'],
                    'summary': 'Atualiza nome e ano de um torneio',
                    'requestBody': input_body,
                    'responses': {
                        '200': _json('Torneio atualizado', tournament_ref),
                        '400': _text('id inválido ou json inválido'),
                        '404': _text('torneio não encontrado'),
                        '405': _text('método não permitido')
                    }
                },
                'delete': {
                    'tags': ['torneios'],
                    'summary': 'Remove um torneio pelo ID',
                    'responses': {
                        '204': {'description': 'No Content'},
                        '400': _text('id inválido'),
                        '404': _text('torneio não encontrado'),
                        '405': _text('método não permitido')
                    }
                }
            },
            '/health': {
                'get': {
                    'summary': 'Health check',
                    'responses': {
                        '200': _json('Serviço saudável', {'type': 'object'}),
                        '503': _json('Redis configurado e inacessível', {'type': 'object'})
                    }
                }
            }
        },
        'components': {
            'schemas': {
                'Torneio': TOURNAMENT_SCHEMA,
                'TorneioInput': TOURNAMENT_INPUT_SCHEMA
            }
        }
    }
