"""CDK Stacks for the ECS platform."""
