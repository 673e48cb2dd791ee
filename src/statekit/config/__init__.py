"""Configuração do statekit: logging estruturado e settings."""
