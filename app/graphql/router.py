from fastapi import Depends
from strawberry.fastapi import GraphQLRouter

from app.core.deps import get_registry
from app.graphql.schema import schema
from app.registry.registry import Registry


# resolvers reach the registry through the same dependency as the REST routes
async def get_context(registry: Registry = Depends(get_registry)) -> dict:
    return {"registry": registry}


router = GraphQLRouter(schema, context_getter=get_context)
