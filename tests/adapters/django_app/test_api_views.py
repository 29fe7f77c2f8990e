"""
Testes para as API Views JSON (usuários, perfis e organizações).

Testa:
- Roteamento (src.config.urls)
- Mapeamento de exceções de domínio para status HTTP
- Identidade via header X-User-Id
- Integração com Container DI (container de testes: repositórios
  InMemory, sem banco)
"""

import json
from unittest.mock import Mock, patch

import pytest
from django.test import Client

from src.config.container import criar_container_de_testes


CPF = "111.444.777-35"


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def container():
    return criar_container_de_testes()


@pytest.fixture
def client(container):
    with patch('src.adapters.django_app.shared.api.get_container', return_value=container):
        yield Client()


def _json(response):
    return json.loads(response.content)


def _post(client, url, data=None, user=None):
    extra = {'HTTP_X_USER_ID': user} if user else {}
    return client.post(url, data=json.dumps(data or {}), content_type='application/json', **extra)


def _send(client, method, url, data=None, user=None):
    extra = {'HTTP_X_USER_ID': user} if user else {}
    return getattr(client, method)(
        url, data=json.dumps(data or {}), content_type='application/json', **extra
    )


def _criar_usuario(client, usuario_id, tipo='CLIENT', email=None):
    response = _post(client, '/api/usuarios/', {
        'id': usuario_id,
        'email': email or f'{usuario_id}@exemplo.com',
        'nome': f'Usuário {usuario_id}',
        'tipo': tipo,
    })
    assert response.status_code == 201, response.content
    return _json(response)['data']


def _endereco(endereco_id, **kwargs):
    dados = {
        'id': endereco_id,
        'rua': 'Rua das Flores',
        'numero': '100',
        'bairro': 'Centro',
        'cidade': 'São Paulo',
        'estado': 'SP',
        'cep': '01310-100',
    }
    dados.update(kwargs)
    return dados


@pytest.fixture
def cliente_com_perfil(client):
    _criar_usuario(client, 'cli-1')
    response = _post(client, '/api/clientes/', {'cpf': CPF}, user='cli-1')
    assert response.status_code == 201
    return 'cli-1'


# =============================================================================
# Usuários
# =============================================================================

class TestUsuarioAPI:

    def test_criar_e_obter(self, client):
        data = _criar_usuario(client, 'u-1', tipo='PROFESSIONAL')

        assert data['pode_oferecer_servicos'] is True

        response = client.get('/api/usuarios/u-1/')
        assert response.status_code == 200
        assert _json(response)['data']['tipo'] == 'PROFESSIONAL'

    def test_usuario_inexistente_404(self, client):
        response = client.get('/api/usuarios/nao-existe/')

        assert response.status_code == 404
        assert _json(response)['success'] is False

    def test_email_invalido_400_com_campo(self, client):
        response = _post(client, '/api/usuarios/', {'email': 'x', 'nome': 'Ana', 'tipo': 'CLIENT'})

        assert response.status_code == 400
        assert _json(response)['meta'] == {'field': 'email'}

    def test_email_duplicado_409(self, client):
        _criar_usuario(client, 'u-1', email='mesmo@exemplo.com')

        response = _post(client, '/api/usuarios/', {
            'email': 'mesmo@exemplo.com', 'nome': 'Outro', 'tipo': 'CLIENT'
        })

        assert response.status_code == 409

    def test_json_invalido_400(self, client):
        response = client.post('/api/usuarios/', data='{nao json', content_type='application/json')

        assert response.status_code == 400

    def test_corpo_nao_objeto_400(self, client):
        response = client.post('/api/usuarios/', data='[1, 2]', content_type='application/json')

        assert response.status_code == 400

    def test_erro_inesperado_500(self, client, container):
        quebrado = Mock()
        quebrado.execute.side_effect = RuntimeError("boom")
        container.obter_usuario_service.override(quebrado)

        response = client.get('/api/usuarios/u-1/')

        assert response.status_code == 500
        assert _json(response)['error'] == "Erro interno do servidor"


# =============================================================================
# Perfil de Cliente
# =============================================================================

class TestPerfilClienteAPI:

    def test_criar_usa_header_x_user_id(self, client, cliente_com_perfil):
        response = client.get('/api/clientes/cli-1/')

        assert response.status_code == 200
        assert _json(response)['data']['cpf_formatado'] == '111.444.777-35'

    def test_criar_duplicado_409(self, client, cliente_com_perfil):
        response = _post(client, '/api/clientes/', {'usuario_id': 'cli-1', 'cpf': CPF})

        assert response.status_code == 409

    def test_cpf_invalido_400(self, client):
        _criar_usuario(client, 'cli-2')

        response = _post(client, '/api/clientes/', {'usuario_id': 'cli-2', 'cpf': '11144477734'})

        assert response.status_code == 400
        assert _json(response)['meta']['field'] == 'cpf'

    def test_usuario_de_outro_tipo_422(self, client):
        _criar_usuario(client, 'prof-1', tipo='PROFESSIONAL')

        response = _post(client, '/api/clientes/', {'usuario_id': 'prof-1', 'cpf': CPF})

        assert response.status_code == 422
        assert _json(response)['meta']['rule'] == 'perfil_exige_tipo_usuario'

    def test_remover_perfil(self, client, cliente_com_perfil):
        response = client.delete('/api/clientes/cli-1/')
        assert response.status_code == 200

        assert client.get('/api/clientes/cli-1/').status_code == 404

    def test_preferencias(self, client, cliente_com_perfil):
        response = _send(client, 'patch', '/api/clientes/cli-1/preferencias/', {
            'notificacoes': {'sms': True},
        })

        assert response.status_code == 200
        assert _json(response)['data']['preferencias']['notificacoes']['sms'] is True


class TestEnderecoAPI:

    URL = '/api/clientes/cli-1/enderecos/'

    def test_fluxo_de_endereco_padrao(self, client, cliente_com_perfil):
        response = _post(client, self.URL, _endereco('a', e_padrao=False))
        assert response.status_code == 201
        assert _json(response)['data']['endereco_padrao_id'] == 'a'

        _post(client, self.URL, _endereco('b'))
        response = _post(client, self.URL, _endereco('c', e_padrao=True))
        assert _json(response)['data']['endereco_padrao_id'] == 'c'

        response = client.delete(self.URL + 'c/')
        data = _json(response)['data']
        assert data['endereco_padrao_id'] == 'a'
        assert [e['id'] for e in data['enderecos']] == ['a', 'b']

        response = _post(client, self.URL + 'b/padrao/')
        assert _json(response)['data']['endereco_padrao_id'] == 'b'

    def test_atualizar(self, client, cliente_com_perfil):
        _post(client, self.URL, _endereco('a'))

        response = _send(client, 'put', self.URL + 'a/', _endereco('a', numero='999'))

        assert response.status_code == 200
        assert _json(response)['data']['enderecos'][0]['numero'] == '999'
        assert _json(response)['data']['enderecos'][0]['e_padrao'] is True

    def test_cep_invalido_400(self, client, cliente_com_perfil):
        response = _post(client, self.URL, _endereco('a', cep='123'))

        assert response.status_code == 400
        assert _json(response)['meta']['field'] == 'cep'

    def test_remover_inexistente_404(self, client, cliente_com_perfil):
        assert client.delete(self.URL + 'x/').status_code == 404

    def test_perfil_inexistente_404(self, client):
        assert _post(client, self.URL, _endereco('a')).status_code == 404


class TestMetodoPagamentoEFavoritoAPI:

    URL = '/api/clientes/cli-1/pagamentos/'

    def test_cartao_sem_ultimos4_400(self, client, cliente_com_perfil):
        response = _post(client, self.URL, {
            'id': 'c1', 'tipo': 'credit_card', 'nome': 'Visa', 'detalhes': {'bandeira': 'visa'}
        })

        assert response.status_code == 400
        assert _json(response)['meta']['field'] == 'ultimos4'

    def test_tipo_que_nao_e_texto_400(self, client, cliente_com_perfil):
        response = _post(client, self.URL, {'id': 'p1', 'tipo': ['pix'], 'nome': 'Pix'})

        assert response.status_code == 400
        assert _json(response)['meta']['field'] == 'tipo'

    def test_fluxo_de_metodo_padrao(self, client, cliente_com_perfil):
        _post(client, self.URL, {'id': 'p1', 'tipo': 'pix', 'nome': 'Pix'})
        _post(client, self.URL, {
            'id': 'c1', 'tipo': 'credit_card', 'nome': 'Visa',
            'detalhes': {'ultimos4': '4242', 'bandeira': 'visa'},
        })

        response = _post(client, self.URL + 'c1/padrao/')
        assert _json(response)['data']['metodo_pagamento_padrao_id'] == 'c1'

        response = _send(client, 'put', self.URL + 'p1/', {'tipo': 'pix', 'nome': 'Pix Banco'})
        assert _json(response)['data']['metodos_pagamento'][0]['nome'] == 'Pix Banco'

        response = client.delete(self.URL + 'c1/')
        assert _json(response)['data']['metodo_pagamento_padrao_id'] == 'p1'

    def test_favoritos(self, client, cliente_com_perfil):
        url = '/api/clientes/cli-1/favoritos/'

        response = _post(client, url, {'servico_id': 's-1'})
        assert response.status_code == 201
        assert _json(response)['data']['servicos_favoritos'] == ['s-1']

        assert _post(client, url, {'servico_id': 's-1'}).status_code == 400

        response = client.delete(url + 's-1/')
        assert _json(response)['data']['servicos_favoritos'] == []

        assert client.delete(url + 's-1/').status_code == 404


# =============================================================================
# Profissional / Empresa
# =============================================================================

class TestProfissionalEmpresaAPI:

    def test_profissional(self, client):
        _criar_usuario(client, 'prof-1', tipo='PROFESSIONAL')

        response = _post(client, '/api/profissionais/', {
            'endereco': 'Rua A, 1',
            'cidade': 'Campinas',
            'modo_atendimento': 'BOTH',
            'especialidades': ['corte'],
        }, user='prof-1')
        assert response.status_code == 201

        response = _post(client, '/api/profissionais/prof-1/especialidades/', {'especialidade': 'barba'})
        assert _json(response)['data']['especialidades'] == ['corte', 'barba']

        response = client.delete('/api/profissionais/prof-1/especialidades/corte/')
        assert _json(response)['data']['especialidades'] == ['barba']

        assert client.get('/api/profissionais/prof-1/').status_code == 200

    def test_profissional_com_horario_numerico_400(self, client):
        _criar_usuario(client, 'prof-2', tipo='PROFESSIONAL')

        response = _post(client, '/api/profissionais/', {
            'endereco': 'Rua A, 1',
            'cidade': 'Campinas',
            'modo_atendimento': 'BOTH',
            'horarios': {'segunda': {'inicio': 800, 'fim': '18:00'}},
        }, user='prof-2')

        assert response.status_code == 400
        assert _json(response)['meta']['field'] == 'horarios'

    def test_empresa(self, client):
        _criar_usuario(client, 'emp-1', tipo='COMPANY')

        response = _post(client, '/api/empresas/', {
            'usuario_id': 'emp-1',
            'cnpj': '11222333000181',
            'endereco': 'Av. Paulista, 1000',
            'cidade': 'São Paulo',
        })
        assert response.status_code == 201
        assert _json(response)['data']['cnpj_formatado'] == '11.222.333/0001-81'

        assert client.get('/api/empresas/emp-1/').status_code == 200
        assert client.get('/api/empresas/outra/').status_code == 404


# =============================================================================
# Organizações
# =============================================================================

@pytest.fixture
def organizacao(client):
    response = _post(client, '/api/organizacoes/', {'nome': 'Salão', 'slug': 'salao'}, user='dono')
    assert response.status_code == 201
    return _json(response)['data']


def _convidar_e_aceitar(client, organizacao_id, usuario_id, papel='MEMBER'):
    _criar_usuario(client, usuario_id)
    response = _post(
        client,
        f'/api/organizacoes/{organizacao_id}/convites/',
        {'email': f'{usuario_id}@exemplo.com', 'papel': papel},
        user='dono',
    )
    assert response.status_code == 201
    convite_id = _json(response)['data']['id']

    response = _post(client, f'/api/organizacoes/convites/{convite_id}/aceitar/', user=usuario_id)
    assert response.status_code == 200
    return _json(response)['data']


class TestOrganizacaoAPI:

    def test_criar_exige_usuario(self, client):
        response = _post(client, '/api/organizacoes/', {'nome': 'Salão', 'slug': 'salao'})

        assert response.status_code == 403

    def test_criar(self, organizacao):
        assert organizacao['membros'][0]['papel'] == 'OWNER'
        assert organizacao['dono_id'] == 'dono'

    def test_slug_duplicado_409(self, client, organizacao):
        response = _post(client, '/api/organizacoes/', {'nome': 'Outro', 'slug': 'salao'}, user='x')

        assert response.status_code == 409

    def test_minhas(self, client, organizacao):
        response = client.get('/api/organizacoes/minhas/', HTTP_X_USER_ID='dono')

        assert _json(response)['meta'] == {'total': 1}

    def test_convite_e_aceite(self, client, container, organizacao):
        data = _convidar_e_aceitar(client, organizacao['id'], 'ana', papel='ADMIN')

        papeis = {m['usuario_id']: m['papel'] for m in data['membros']}
        assert papeis == {'dono': 'OWNER', 'ana': 'ADMIN'}

        tipos = [e.event_type for e in container.event_publisher().published_events]
        assert 'MembroConvidadoEvent' in tipos
        assert 'MembroAdicionadoEvent' in tipos

    def test_membro_nao_convida_403(self, client, organizacao):
        _convidar_e_aceitar(client, organizacao['id'], 'bia')

        response = _post(
            client, f"/api/organizacoes/{organizacao['id']}/convites/",
            {'email': 'x@y.com'}, user='bia',
        )

        assert response.status_code == 403

    def test_organizacao_inexistente_404(self, client):
        response = _post(
            client, '/api/organizacoes/nao-existe/convites/', {'email': 'x@y.com'}, user='dono'
        )

        assert response.status_code == 404

    def test_alterar_papel(self, client, organizacao):
        _convidar_e_aceitar(client, organizacao['id'], 'bia')
        url = f"/api/organizacoes/{organizacao['id']}/membros/bia/"

        assert _send(client, 'patch', url, {}, user='dono').status_code == 400

        response = _send(client, 'patch', url, {'papel': 'ADMIN'}, user='dono')
        assert response.status_code == 200

        response = _send(client, 'patch', url, {'papel': 'MEMBER'}, user='bia')
        assert response.status_code == 403

    def test_rebaixar_unico_owner_422(self, client, organizacao):
        url = f"/api/organizacoes/{organizacao['id']}/membros/dono/"

        response = _send(client, 'patch', url, {'papel': 'MEMBER'}, user='dono')

        assert response.status_code == 422

    def test_remover_membro(self, client, organizacao):
        _convidar_e_aceitar(client, organizacao['id'], 'bia')
        base = f"/api/organizacoes/{organizacao['id']}/membros/"

        assert _send(client, 'delete', base + 'dono/', user='dono').status_code == 403

        response = _send(client, 'delete', base + 'bia/', user='dono')
        assert response.status_code == 200
        assert [m['usuario_id'] for m in _json(response)['data']['membros']] == ['dono']

    def test_permissao(self, client, organizacao):
        _convidar_e_aceitar(client, organizacao['id'], 'bia')
        url = f"/api/organizacoes/{organizacao['id']}/permissao/"

        response = client.get(url, {'papeis': 'OWNER,ADMIN'}, HTTP_X_USER_ID='bia')
        assert _json(response)['data']['permitido'] is False

        response = client.get(url, HTTP_X_USER_ID='bia')
        assert _json(response)['data']['permitido'] is True

        response = client.get(url, {'papeis': 'GUEST'}, HTTP_X_USER_ID='bia')
        assert response.status_code == 400


class TestHealth:

    def test_health(self, client):
        response = client.get('/health/')

        assert response.status_code == 200
        assert _json(response) == {'status': 'ok'}
