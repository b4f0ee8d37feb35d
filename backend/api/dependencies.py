"""Shared dependencies for API routes."""

from services.pipeline.stage_registry import get_stage


def get_extractor():
    return get_stage("extractor")


def get_comparator():
    return get_stage("comparator")
