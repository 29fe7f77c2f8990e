"""
Configuração do Celery para processamento assíncrono.

O Celery é usado para:
- Processar Domain Events de forma assíncrona
- Notificações (boas-vindas, convites de organização)

Arquitetura:
- Broker: RabbitMQ (mensagens entre Django e Workers)
- Backend: Redis (resultados de tarefas)
- Workers: Processos que executam as tarefas

Uso:
    # Iniciar worker
    celery -A src.config.celery worker -l INFO -Q default,events,notifications
"""

import os
from celery import Celery
from kombu import Queue, Exchange

# Definir módulo de settings do Django
os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

app = Celery('marketplace')

# Carregar configurações do Django (prefixo CELERY_)
app.config_from_object('django.conf:settings', namespace='CELERY')

app.conf.update(
    task_serializer='json',
    accept_content=['json'],
    result_serializer='json',

    timezone='America/Sao_Paulo',
    enable_utc=True,

    task_acks_late=True,  # ACK após execução
    task_reject_on_worker_lost=True,
    worker_prefetch_multiplier=1,

    # Monitoramento
    worker_send_task_events=True,
    task_send_sent_event=True,

    task_default_queue='default',
)

app.conf.task_queues = (
    Queue('default', Exchange('default'), routing_key='default'),
    Queue('events', Exchange('events'), routing_key='events.#'),
    Queue('notifications', Exchange('notifications'), routing_key='notifications.#'),
)

# Roteamento: notificações têm fila própria, demais handlers vão para 'events'
app.conf.task_routes = {
    'src.adapters.django_app.events.handlers.notify_user': {'queue': 'notifications'},
    'src.adapters.django_app.events.handlers.notify_email': {'queue': 'notifications'},
    'src.adapters.django_app.events.handlers.*': {'queue': 'events'},
}

# Auto-descoberta de tarefas (módulo handlers)
app.autodiscover_tasks(['src.adapters.django_app.events'], related_name='handlers')
