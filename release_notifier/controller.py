import logging

from flask import Flask, jsonify, request
from werkzeug.exceptions import BadRequest, HTTPException

from .constants import load_category_configs
from .cooldown import CooldownTracker
from .models import EventCategory
from .pipeline import ACCEPTED, DOWNSTREAM_FAILURE, DispatchPipeline
from .services import DiscordWebhookSender

logger = logging.getLogger(__name__)

WEBHOOK_ROUTES = {
    '/webhooks/mod/version': EventCategory.MOD_VERSION,
    '/webhooks/launcher/version': EventCategory.LAUNCHER_VERSION,
    '/webhooks/loader/version': EventCategory.LOADER_VERSION,
}


def build_default_pipeline():
    configs = load_category_configs()
    for category, config in configs.items():
        if not config.webhook_url:
            logger.warning(f"Webhook do Discord para {category.value} não configurado! Releases dessa categoria vão falhar no envio.")
    return DispatchPipeline(configs, DiscordWebhookSender(), tracker=CooldownTracker())


def create_app(pipeline=None):
    app = Flask(__name__)
    # Um único pipeline (e portanto um único CooldownTracker) por processo
    pipeline = pipeline or build_default_pipeline()
    app.config['DISPATCH_PIPELINE'] = pipeline

    @app.route('/health', methods=['GET'])
    def health():
        return {'status': 'ok', 'service': 'release-notifier'}, 200

    def make_webhook_view(category):
        def view():
            try:
                data = request.get_json(force=True)
            except BadRequest as exc:
                return jsonify(error='SyntaxError', message=exc.description), 400

            result = pipeline.receive(category, data)
            if result['status'] == ACCEPTED:
                logger.info(f"{category.value} entregue")
                return jsonify(success=True), 200

            logger.warning(f"{category.value} rejeitado: {result['kind']}: {result['message']}")
            if result['kind'] == DOWNSTREAM_FAILURE:
                return jsonify(error=result['kind'], message=result['message']), 502
            return jsonify(error=result['kind'], message=result['message'], field=result.get('field')), 400

        view.__name__ = f"post_{category.name.lower()}"
        return view

    for rule, category in WEBHOOK_ROUTES.items():
        app.add_url_rule(rule, view_func=make_webhook_view(category), methods=['POST'])

    @app.errorhandler(404)
    def not_found(_exc):
        return jsonify(error='NotFound', message='The requested resource could not be found!'), 404

    @app.errorhandler(Exception)
    def server_error(exc):
        if isinstance(exc, HTTPException):
            return jsonify(error=exc.name, message=exc.description), exc.code
        logger.exception("Erro inesperado ao processar webhook")
        return jsonify(error='ServerError', message='Something went wrong on our end!'), 500

    return app
