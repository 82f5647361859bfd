"""
FastAPI routers.

`crud` builds the create/update/list/get/delete endpoints for any entity;
`entities` lists which models are exposed and under which path.
"""
