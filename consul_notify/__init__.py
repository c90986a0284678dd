"""Relay de eventos de watch de checks do Consul -> Slack.

Este pacote contém:
- constants: variáveis de ambiente e valores fixos
- errors: taxonomia de erros do pipeline de notificação
- checks: decodificação do payload do watch em registros de check
- utils: helpers de escape/limite de texto para mrkdwn
- formatters: renderização da mensagem (Slack Block Kit)
- services: entrega do payload no webhook de destino
- notifier: contrato Notifier e implementação Slack
- interceptor: wrapper que encaminha o corpo da requisição ao Notifier
- controller: criação dos Flask apps e endpoints
"""
