from agenda.contacts.seed import SAMPLE_CONTACTS, seed_contacts


async def test_seed_fills_empty_agenda(db, count_contacts):
    inserted = await seed_contacts(db)

    assert inserted == len(SAMPLE_CONTACTS)
    assert await count_contacts() == len(SAMPLE_CONTACTS)


async def test_seed_skips_existing_agenda(db, make_contact, count_contacts):
    await make_contact(first="Ada")

    assert await seed_contacts(db) == 0
    assert await count_contacts() == 1
