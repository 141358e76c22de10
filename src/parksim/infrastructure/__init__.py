"""Infrastructure layer: event bus and factories"""
