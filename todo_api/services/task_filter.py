"""
Task Filter Engine.

Query-string filters are parsed into a typed ``TaskFilterCriteria`` and
turned into SQLAlchemy clauses by the pure ``build_predicate``. Clauses are
AND-ed; ``search`` is an OR over title and description.
"""

from dataclasses import dataclass
from datetime import date
from typing import Optional, Tuple

from sqlalchemy import false, or_

from todo_api.db import db
from todo_api.models.task import Task, TaskTag
from todo_api.repositories.task_repository import TaskRepository
from todo_api.services import ownership
from todo_api.utils import day_bounds, parse_date

LIKE_ESCAPE = "\\"


@dataclass(frozen=True)
class TaskFilterCriteria:
    task_list_id: Optional[str] = None
    completed: Optional[bool] = None
    priority: Optional[str] = None
    tags: Optional[Tuple[str, ...]] = None
    due_date: Optional[date] = None
    search: Optional[str] = None

    @classmethod
    def from_query_args(cls, args):
        """
        Build criteria from request args (a MultiDict or plain dict).

        ``completed`` is True only for the literal "true"; any other value
        filters on False. An unparseable ``dueDate`` is ignored.
        """
        getlist = getattr(args, "getlist", None)

        completed = args.get("completed")
        if completed is not None:
            completed = completed == "true"

        raw_tags = getlist("tags") if getlist else ([args["tags"]] if args.get("tags") else [])
        tags = None
        tag_string = ",".join(value for value in raw_tags if value)
        if tag_string:
            tags = tuple(tag.strip() for tag in tag_string.split(","))

        due_date = parse_date(args["dueDate"]) if args.get("dueDate") else None

        return cls(
            task_list_id=args.get("taskListId") or None,
            completed=completed,
            priority=args.get("priority") or None,
            tags=tags,
            due_date=due_date,
            search=args.get("search") or None,
        )


def escape_like(text):
    return (
        text.replace(LIKE_ESCAPE, LIKE_ESCAPE * 2)
        .replace("%", LIKE_ESCAPE + "%")
        .replace("_", LIKE_ESCAPE + "_")
    )


def build_predicate(list_ids, criteria):
    """Clauses selecting tasks in ``list_ids`` that satisfy ``criteria``"""
    list_ids = list(list_ids)
    if not list_ids:
        return [false()]

    clauses = [Task.task_list_id.in_(list_ids)]

    if criteria.completed is not None:
        clauses.append(Task.completed == criteria.completed)

    if criteria.priority is not None:
        clauses.append(Task.priority == criteria.priority)

    if criteria.tags:
        tagged = db.select(TaskTag.task_id).where(TaskTag.name.in_(criteria.tags))
        clauses.append(Task.id.in_(tagged))

    if criteria.due_date is not None:
        start, end = day_bounds(criteria.due_date)
        clauses.append(Task.due_date >= start)
        clauses.append(Task.due_date <= end)

    if criteria.search:
        pattern = f"%{escape_like(criteria.search)}%"
        clauses.append(or_(
            Task.title.ilike(pattern, escape=LIKE_ESCAPE),
            Task.description.ilike(pattern, escape=LIKE_ESCAPE),
        ))

    return clauses


def find_tasks(user_id, criteria):
    """Tasks visible to ``user_id`` matching ``criteria``, newest first"""
    if criteria.task_list_id:
        task_list = ownership.assert_list_owned(user_id, criteria.task_list_id)
        list_ids = [task_list.id]
    else:
        list_ids = ownership.owned_list_ids(user_id)

    return TaskRepository.find(build_predicate(list_ids, criteria))
