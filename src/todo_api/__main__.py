from todo_api.cli import app

app(prog_name="todo-api")
