"""Advanced JavaScript Concepts for Developers: A Comprehensive Guide.

The article is authored here once and built at import time. Inline prose
uses the notation from jsguide.models.inline (`code`, **strong**).
"""

import textwrap

from jsguide.models import (
    Article,
    Callout,
    CodeBlock,
    Heading,
    ListBlock,
    Paragraph,
    Section,
    Table,
)


def _p(text: str) -> Paragraph:
    return Paragraph.from_text(text)


def _h(text: str) -> Heading:
    return Heading(text)


def _code(source: str) -> CodeBlock:
    return CodeBlock(textwrap.dedent(source).strip("\n"))


def _ul(*items: str) -> ListBlock:
    return ListBlock.from_items(*items)


def _ol(*items: str) -> ListBlock:
    return ListBlock.from_items(*items, ordered=True)


HOISTING = Section(
    title="📌 1. Hoisting",
    blocks=(
        _p(
            "Hoisting is a JavaScript behavior where variable and function declarations "
            "are moved to the top of their scope during the compilation phase. However, "
            "only the **declarations** are hoisted, not the initializations."
        ),
        _h("Variable Hoisting"),
        _code(
            """
            console.log(x); // undefined (not ReferenceError)
            var x = 5;
            """
        ),
        _p("Here, `var x` is hoisted but initialized as `undefined` until the assignment line."),
        _h("Function Hoisting"),
        _code(
            """
            greet(); // "Hello!" (works because the function is hoisted)
            function greet() {
              console.log("Hello!");
            }
            """
        ),
        _p("Function declarations are fully hoisted, unlike function expressions:"),
        _code(
            """
            greet(); // TypeError: greet is not a function
            var greet = function() {
              console.log("Hello!");
            };
            """
        ),
        _h("Implications"),
        _ul(
            "Use `let` and `const` (block-scoped) to avoid hoisting issues.",
            "Always declare variables before using them.",
        ),
    ),
)

CLOSURES = Section(
    title="📌 2. Closures",
    blocks=(
        _p(
            "A **closure** is a function that retains access to its outer function's "
            "variables even after the outer function has returned."
        ),
        _h("Example"),
        _code(
            """
            function outer() {
              let count = 0;
              return function inner() {
                count++;
                console.log(count);
              };
            }
            const counter = outer();
            counter(); // 1
            counter(); // 2
            """
        ),
        _p("Here, `inner()` remembers `count` from `outer()`."),
        _h("Use Cases"),
        _ul(
            "**Data privacy** (module pattern)",
            "**Memoization** (caching function results)",
            "**Event handlers** (maintaining state)",
        ),
    ),
)

PROMISES = Section(
    title="📌 3. Promises & Async/Await",
    blocks=(
        _h("Promises"),
        _p("A **Promise** represents an asynchronous operation that may complete in the future."),
        _code(
            """
            const fetchData = () => {
              return new Promise((resolve, reject) => {
                setTimeout(() => resolve("Data fetched!"), 1000);
              });
            };

            fetchData()
              .then(data => console.log(data)) // "Data fetched!"
              .catch(err => console.error(err));
            """
        ),
        _h("Async/Await"),
        _p("A cleaner way to handle Promises:"),
        _code(
            """
            async function getData() {
              try {
                const data = await fetchData();
                console.log(data); // "Data fetched!"
              } catch (err) {
                console.error(err);
              }
            }
            """
        ),
        _h("Key Difference"),
        _ul(
            "Promises use `.then()` chains.",
            "Async/await uses synchronous-like syntax.",
        ),
    ),
)

EVENT_LOOP = Section(
    title="📌 4. Event Loop",
    blocks=(
        _p("JavaScript is single-threaded but handles async operations via the **Event Loop**."),
        _h("How It Works"),
        _ol(
            "**Call Stack** – Executes synchronous code.",
            "**Web APIs** – Handle async tasks (`setTimeout`, `fetch`).",
            "**Callback Queue** – Holds callbacks from Web APIs.",
            "**Event Loop** – Moves callbacks from the queue to the stack when the stack is empty.",
        ),
        _h("Example"),
        _code(
            """
            console.log("Start");
            setTimeout(() => console.log("Timeout"), 0);
            console.log("End");
            // Output: Start → End → Timeout
            """
        ),
        _p("The `setTimeout` callback is deferred even with `0` delay."),
    ),
)

THIS_KEYWORD = Section(
    title="📌 5. 'this' Keyword",
    blocks=(
        _p("`this` refers to the **execution context**."),
        Table.from_text(
            header=["Context", "Example", "`this` Value"],
            rows=[
                ["Global", "`console.log(this)`", "`window` (browser)"],
                ["Object Method", "`obj.method()`", "`obj`"],
                ["Arrow Function", "`() => console.log(this)`", "Inherits from parent scope"],
                ["Constructor", "`new Person()`", "New instance"],
            ],
        ),
        _h("Example"),
        _code(
            """
            const person = {
              name: "Alice",
              greet: function() {
                console.log(`Hello, ${this.name}!`);
              }
            };
            person.greet(); // "Hello, Alice!"
            """
        ),
    ),
)

DEBOUNCE_THROTTLE = Section(
    title="📌 6. Debounce vs Throttle",
    blocks=(
        _h("Debounce"),
        _p("Delays a function until after a certain time has passed since the last call."),
        _p("**Use Case:** Search bar input."),
        _code(
            """
            function debounce(func, delay) {
              let timeout;
              return function() {
                clearTimeout(timeout);
                timeout = setTimeout(() => func.apply(this, arguments), delay);
              };
            }
            """
        ),
        _h("Throttle"),
        _p("Limits function calls to once per specified time interval."),
        _p("**Use Case:** Scroll/resize events."),
        _code(
            """
            function throttle(func, limit) {
              let inThrottle;
              return function() {
                if (!inThrottle) {
                  func.apply(this, arguments);
                  inThrottle = true;
                  setTimeout(() => (inThrottle = false), limit);
                }
              };
            }
            """
        ),
    ),
)

DATA_TYPES = Section(
    title="📌 7. Data Types & Coercion",
    blocks=(
        _h("Primitive Types"),
        _p(
            "`string`, `number`, `boolean`, `null`, `undefined`, `symbol`, `bigint`"
        ),
        _h("Type Coercion"),
        _ul(
            '**Implicit:** `"5" + 1 = "51"` (string concatenation)',
            '**Explicit:** `Number("5") → 5`',
        ),
        _h("Example"),
        _code(
            """
            console.log(1 == "1"); // true (coercion)
            console.log(1 === "1"); // false (strict equality)
            """
        ),
    ),
)

ARRAY_METHODS = Section(
    title="📌 8. Array Methods",
    blocks=(
        Table.from_text(
            header=["Method", "Example", "Use Case"],
            rows=[
                ["`map`", "`arr.map(x => x * 2)`", "Transform array"],
                ["`filter`", "`arr.filter(x => x > 2)`", "Filter elements"],
                ["`reduce`", "`arr.reduce((acc, x) => acc + x, 0)`", "Aggregate values"],
                ["`find`", "`arr.find(x => x.id === 1)`", "Find first match"],
            ],
        ),
    ),
)

DOM_MANIPULATION = Section(
    title="📌 9. DOM Manipulation",
    divider=False,
    blocks=(
        _h("Selecting Elements"),
        _code(
            """
            const el = document.getElementById("myId");
            const els = document.querySelectorAll(".myClass");
            """
        ),
        _h("Event Handling"),
        _code(
            """
            el.addEventListener("click", () => console.log("Clicked!"));
            """
        ),
        _h("Modifying Content"),
        _code(
            """
            el.textContent = "New Text";
            el.innerHTML = "<strong>Bold</strong>";
            """
        ),
    ),
)

QUICK_TIPS = Section(
    title="10. Quick Tips",
    divider=False,
    blocks=(
        Callout(
            css_class="tip",
            blocks=(
                _ul(
                    "✅ Use `const` by default, `let` if reassigning.",
                    "✅ Avoid `==` (use `===` for strict equality).",
                    "✅ Use template literals for strings (`${variable}`).",
                    "✅ Prefer arrow functions for concise syntax.",
                    "✅ Always handle errors in async code (`try/catch`).",
                ),
            ),
        ),
    ),
)

CONCLUSION = Section(
    title="Conclusion",
    css_class="conclusion",
    divider=False,
    blocks=(
        _p(
            "Mastering these JavaScript concepts will make you a more confident and "
            "efficient developer. Experiment with these examples, apply them in real "
            "projects, and keep exploring!"
        ),
        _p("**🚀 Happy Coding!**"),
        _p("Would you like any section expanded further? Let me know in the comments! 👇"),
    ),
)

ARTICLE = Article(
    title="Advanced JavaScript Concepts for Developers: A Comprehensive Guide",
    intro=(
        _p(
            "JavaScript is a powerful and versatile language, but mastering its advanced "
            "concepts can take your development skills to the next level. Whether you're a "
            "beginner looking to deepen your understanding or an intermediate developer "
            "refining your knowledge, this guide covers essential JavaScript concepts with "
            "clear explanations and practical examples."
        ),
        _p("Let's dive in!"),
    ),
    sections=(
        HOISTING,
        CLOSURES,
        PROMISES,
        EVENT_LOOP,
        THIS_KEYWORD,
        DEBOUNCE_THROTTLE,
        DATA_TYPES,
        ARRAY_METHODS,
        DOM_MANIPULATION,
        QUICK_TIPS,
        CONCLUSION,
    ),
)
