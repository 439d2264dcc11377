"""Console UI for kelime."""

from core.models import QuizMode
from core.session import SessionController

MODE_TITLES = {
    QuizMode.FRONT_TO_BACK.value: 'English -> Turkish',
    QuizMode.BACK_TO_FRONT.value: 'Turkish -> English',
}

COMMANDS = {
    ':pass': 'send this word to the back of the queue',
    ':show': 'show the answer',
    ':hint': 'reveal one more letter (twice for syllables)',
    ':mode': 'switch question direction',
    ':shuffle': 'shuffle the word order',
    ':reset': 'reset order and statistics',
    ':help': 'show this help',
    ':quit': 'exit',
}


class ConsoleUI:
    """Console user interface over a SessionController."""

    def __init__(self, controller: SessionController, input_func=input, output_func=print):
        self.controller = controller
        self.input = input_func
        self.output = output_func

    def confirm(self, question: str) -> bool:
        """Ask a yes/no question. Anything but yes counts as no."""
        reply = self.input(f'{question} [y/N] ').strip().lower()
        return reply in ('y', 'yes', 'e', 'evet')

    def print_header(self, view: dict):
        self.output('=' * 50)
        self.output(f'{MODE_TITLES[view["mode"]]} Quiz')
        self.output(f'Total: {view["total"]} | Remaining: {view["remaining"]} | Progress: {view["progress_percent"]}%')
        stats = view['stats']
        self.output(f'Correct: {stats["correct"]}  Wrong: {stats["wrong"]}  Passed: {stats["passed"]}')
        self.output('=' * 50)

    def print_question(self, view: dict):
        self.output(f'\n>>> {view["prompt"]}')
        hints = view['hints']
        if 'mask' in hints:
            self.output(f'Hint: {hints["mask"]}')
        if 'syllables' in hints:
            self.output(f'Syllables: {hints["syllables"]}')

    def print_help(self):
        self.output('Type your answer, or one of:')
        for command, description in COMMANDS.items():
            self.output(f'  {command:<10} {description}')

    def handle_revealed(self, view: dict) -> bool:
        """Show the answer and wait for the user to move on. Returns False to quit."""
        if view['last_outcome'] == 'wrong':
            self.output('Wrong.')
        self.output(f'Correct answer: {view["answer"]}')
        reply = self.input('Press Enter for the next word ').strip().lower()
        if reply == ':quit':
            return False
        self.controller.next()
        return True

    def handle_command(self, command: str) -> bool:
        """Run a console command. Returns False to quit."""
        if command == ':quit':
            return False
        if command == ':pass':
            self.controller.pass_item()
        elif command == ':show':
            self.controller.reveal()
        elif command == ':hint':
            self.controller.request_hint()
        elif command == ':mode':
            self.controller.toggle_mode()
        elif command == ':shuffle':
            self.controller.reshuffle()
        elif command == ':reset':
            if self.confirm('Reset statistics and order?'):
                self.controller.reset_progress()
                self.output('Progress reset.')
        elif command == ':help':
            self.print_help()
        else:
            self.output(f'Unknown command: {command}')
        return True

    def run(self):
        """Run the main application loop."""
        if not self.controller.has_items:
            self.output('The word list is empty.')
            return

        self.print_help()
        while True:
            view = self.controller.view()
            if view['phase'] == 'revealed':
                if not self.handle_revealed(view):
                    break
                continue

            self.print_header(view)
            self.print_question(view)
            user_input = self.input('==> ').strip()
            if not user_input:
                continue
            if user_input.startswith(':'):
                if not self.handle_command(user_input.lower()):
                    break
                continue

            view = self.controller.submit(user_input)
            if view['last_outcome'] == 'correct':
                self.output('Correct!')

        self.output('Goodbye!')
