import chainlit as cl
from chainlit.input_widget import Select, TextInput

from scriptforge.config.settings import settings
from scriptforge.container import configure_container, container
from scriptforge.core.errors import DestinationExistsError, ScriptForgeError
from scriptforge.core.services.workflow import ScriptWorkflow

configure_container(settings)

TEMPLATE_FIELD = "__template__"


def _workflow() -> ScriptWorkflow | None:
    return cl.user_session.get("workflow")


async def _send_form(workflow: ScriptWorkflow) -> None:
    """Push the template dropdown and one text field per placeholder."""
    items = workflow.menu_items
    current = workflow.current
    widgets = [
        Select(
            id=TEMPLATE_FIELD,
            label="Template",
            values=items,
            initial_index=items.index(current.menu_label),
        )
    ]
    for key, value in workflow.editable_fields().items():
        widgets.append(TextInput(id=key, label=key, initial=value))

    await cl.ChatSettings(widgets).send()
    await _send_preview(workflow)


async def _send_preview(workflow: ScriptWorkflow) -> None:
    """Show the target path with Close, and OK once ClassName is filled in."""
    previous: cl.Message | None = cl.user_session.get("preview_message")
    if previous is not None:
        await previous.remove()

    actions = [cl.Action(name="close", payload={}, label="Close")]
    if workflow.can_submit:
        actions.append(cl.Action(name="create", payload={}, label="OK"))

    msg = cl.Message(
        content=f"Creating file `{workflow.preview_path}`",
        actions=actions,
    )
    await msg.send()
    cl.user_session.set("preview_message", msg)


async def _open_form() -> None:
    workflow = container.resolve(ScriptWorkflow)
    cl.user_session.set("workflow", workflow)
    cl.user_session.set("preview_message", None)

    if not workflow.start():
        await cl.Message(
            content=f"No script templates found in `{settings.templates_dir_name}` folders."
        ).send()
        return

    await _send_form(workflow)


@cl.on_chat_start
async def start():
    await _open_form()


@cl.on_settings_update
async def on_form_update(values: dict):
    workflow = _workflow()
    if workflow is None or workflow.current is None:
        return

    label = values.get(TEMPLATE_FIELD)
    if label and label != workflow.current.menu_label:
        workflow.select(label)
        await _send_form(workflow)
        return

    editable = set(workflow.current.editable_keys)
    workflow.update(
        {key: value or "" for key, value in values.items() if key in editable}
    )
    await _send_preview(workflow)


@cl.action_callback("create")
async def on_create(action: cl.Action):
    workflow = _workflow()
    if workflow is None or not workflow.can_submit:
        return

    try:
        path = workflow.submit()
    except DestinationExistsError as e:
        await action.remove()
        cl.user_session.set("preview_message", None)
        await cl.ErrorMessage(
            content=f"{e}. Type anything to start again."
        ).send()
        return
    except (ScriptForgeError, OSError) as e:
        await cl.ErrorMessage(content=str(e)).send()
        return

    await action.remove()
    cl.user_session.set("preview_message", None)
    await cl.Message(
        content=f"Created **{path.name}**. Type anything to create another file.",
        elements=[cl.File(name=path.name, path=str(path))],
    ).send()


@cl.action_callback("close")
async def on_close(action: cl.Action):
    workflow = _workflow()
    if workflow is not None:
        workflow.cancel()

    await action.remove()
    cl.user_session.set("preview_message", None)
    await cl.Message(content="Closed. Type anything to start again.").send()


@cl.on_message
async def main(message: cl.Message):
    workflow = _workflow()
    if workflow is None or workflow.current is None:
        await _open_form()
        return

    await _send_preview(workflow)
