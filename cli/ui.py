from rich.console import Console
from rich.panel import Panel
from rich.text import Text
import inquirer

console = Console()


def show_error(message):
    '''Show error message in red'''
    console.print(f"  ❌ {message}", style="bold red")

def show_warning(message):
    '''Show warning message in yellow'''
    console.print(f"  ⚠️  {message}", style="yellow")

def show_header(event_name):
    '''Print the HOOKSMITH header for a lifecycle event'''
    logo = Text()
    logo.append("  HOOKSMITH", style="bold cyan")
    logo.append("  v1.0", style="bold white")
    logo.append(f"  |  {event_name}", style="dim")
    console.print(Panel(logo, border_style="cyan", padding=(0, 2)))

def show_step(message, status="done"):
    '''Show a progress step with vertical connecting line.
    status: "done", "active", "skipped", "error"
    '''
    icons = {"done": "✅", "active": "⏳", "skipped": "⏭️ ", "error": "❌"}
    styles = {"done": "bold green", "active": "bold cyan", "skipped": "dim", "error": "bold red"}
    icon = icons.get(status, "•")
    style = styles.get(status, "white")
    console.print(f"  │", style="dim cyan")
    console.print(f"  ├── {icon} {message}", style=style)

def show_step_final(message, success=True):
    '''Show the final step (uses end connector)'''
    if success:
        console.print(f"  │", style="dim cyan")
        console.print(f"  └── ✅ {message}", style="bold green")
    else:
        console.print(f"  │", style="dim cyan")
        console.print(f"  └── ❌ {message}", style="bold red")

def show_step_detail(message):
    '''Show a detail line under a step, maintaining the vertical line'''
    console.print(f"  │     {message}", style="dim green", markup=False, highlight=False)

def step_input(prompt):
    '''Input with vertical line prefix for connected config flow'''
    console.print(f"  │", style="dim cyan", end="")
    return input(f"     {prompt}")

def step_confirm(message, default=False):
    '''Yes/no question with vertical line prefix'''
    console.print(f"  │", style="dim cyan")
    questions = [
        inquirer.Confirm(
            'answer',
            message=message,
            default=default
        )
    ]

    answer = inquirer.prompt(questions)
    if not answer:
        # Ctrl+C inside inquirer returns None
        return False
    return bool(answer['answer'])
