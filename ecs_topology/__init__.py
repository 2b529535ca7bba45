"""ECS cluster topology builder"""
