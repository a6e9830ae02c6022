"""
GraphQL schema for the job board.

The schema is static: one object type (Job) and two root operations
(jobs, job(id)). Data comes from the per-request snapshot found on
info.context, so the schema itself holds no state.
"""

from graphql import (
    GraphQLArgument,
    GraphQLField,
    GraphQLInt,
    GraphQLList,
    GraphQLObjectType,
    GraphQLResolveInfo,
    GraphQLSchema,
    GraphQLString,
)

job_type = GraphQLObjectType(
    name="Job",
    fields={
        "id": GraphQLField(GraphQLInt),
        "position": GraphQLField(GraphQLString),
        "company": GraphQLField(GraphQLString),
        "description": GraphQLField(GraphQLString),
        "location": GraphQLField(GraphQLString),
        "employmentType": GraphQLField(
            GraphQLString, resolve=lambda job, info: job.employment_type
        ),
        "skillsRequired": GraphQLField(
            GraphQLList(GraphQLString), resolve=lambda job, info: job.skills_required
        ),
    },
)


def resolve_jobs(root, info: GraphQLResolveInfo):
    return info.context.engine().list_all()


def resolve_job(root, info: GraphQLResolveInfo, **args):
    return info.context.engine().get_by_id(args.get("id"))


root_query = GraphQLObjectType(
    name="RootQuery",
    fields={
        "jobs": GraphQLField(
            GraphQLList(job_type),
            description="All Jobs",
            resolve=resolve_jobs,
        ),
        "job": GraphQLField(
            job_type,
            description="Get Jobs by ID",
            args={"id": GraphQLArgument(GraphQLInt)},
            resolve=resolve_job,
        ),
    },
)

schema = GraphQLSchema(query=root_query)
