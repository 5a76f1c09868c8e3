"""Pacote do relay de releases (mod, launcher, loader) -> Discord.

Este pacote contém:
- constants: variáveis de ambiente e configuração por categoria
- models: categorias, eventos validados e notificações compostas
- validation: validação dos payloads recebidos
- cooldown: controle de cooldown do ping de cargo por categoria
- formatters: composição das mensagens (content + embed)
- services: envio para webhooks do Discord
- pipeline: orquestração validar -> compor -> enviar
- controller: criação do Flask app e endpoints
"""
