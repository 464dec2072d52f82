# HOOKSMITH v1.0
'''
Question sources handed to the orchestrator.

Both classes expose the same pair of methods:
    ask(prompt)      - free text answer, None when the operator gives none
    confirm(prompt)  - yes/no answer
'''


class ConsolePrompts:
    '''Interactive questions on the terminal'''

    def ask(self, prompt):
        from cli.ui import step_input

        try:
            answer = step_input(prompt).strip()
        except EOFError:
            # stdin closed: same as an empty answer
            return None
        return answer or None

    def confirm(self, prompt):
        from cli.ui import step_confirm

        return step_confirm(prompt)


class NonInteractivePrompts:
    '''Every question goes unanswered (composer --no-interaction)'''

    def ask(self, prompt):
        return None

    def confirm(self, prompt):
        return False


def get_prompts(interactive=True):
    '''Pick the question source for this run'''
    if interactive:
        return ConsolePrompts()
    return NonInteractivePrompts()
