"""
Basic usage of slicepage.

Shows offset pages, cursor pages in both directions and walking a whole
collection with a Paginator.
"""

import logging

from pydantic import BaseModel

from slicepage import InvalidArgumentError, Paginator, paginate


class Message(BaseModel):
    message_id: str
    body: str


# Messages sorted by id, as they would come back from storage
messages = [Message(message_id=f"msg-{i:03d}", body=f"hello #{i}") for i in range(1, 24)]


def main() -> None:
    logging.basicConfig(level=logging.DEBUG)

    # Offset style: first and last pages
    first_page = paginate(messages, "message_id", take=5)
    print("first page:", [m.message_id for m in first_page.data], first_page.to_dict()["hasMore"])

    newest = paginate(messages, "message_id", take=-3)
    print("newest:", [m.message_id for m in newest.data])

    # Cursor style: continue after the last record we showed
    cursor = first_page.data[-1].message_id
    second_page = paginate(messages, "message_id", cursor=cursor, take=5)
    print("second page:", [m.message_id for m in second_page.data])

    # ...and go back from the first record of that page
    back = paginate(messages, "message_id", cursor=second_page.data[0].message_id, take=-5)
    print("back:", [m.message_id for m in back.data])

    # Walk everything, 10 at a time
    paginator = Paginator("message_id", default_take=10)
    for number, page in enumerate(paginator.iter_pages(messages), start=1):
        print(f"page {number}: {page.count} messages, first={page.first} last={page.last}")

    try:
        paginate(messages, "message_id", take=0)
    except InvalidArgumentError as e:
        print("rejected:", e)


if __name__ == "__main__":
    main()
